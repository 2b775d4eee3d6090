"""Tests for ageboard.autoload.registry — resolver-backed class registry."""

import pytest

from ageboard.autoload.registry import ClassRegistry
from ageboard.errors import ClassNotFound


class _Thing:
    def __init__(self, size: int = 0) -> None:
        self.size = size


class _CountingResolver:
    """Resolver stub recording every name it is asked for."""

    def __init__(self, classes: dict[str, type]) -> None:
        self.classes = classes
        self.calls: list[str] = []

    def __call__(self, name: str) -> type:
        self.calls.append(name)
        if name not in self.classes:
            raise ClassNotFound(name, f"{name}.py", "no such file")
        return self.classes[name]


class TestClassRegistry:
    def test_get_resolves_on_first_reference(self) -> None:
        resolver = _CountingResolver({"Thing": _Thing})
        registry = ClassRegistry(resolver)
        assert registry.get("Thing") is _Thing
        assert resolver.calls == ["Thing"]

    def test_get_does_not_resolve_twice(self) -> None:
        resolver = _CountingResolver({"Thing": _Thing})
        registry = ClassRegistry(resolver)
        registry.get("Thing")
        registry.get("Thing")
        assert resolver.calls == ["Thing"]

    def test_define_skips_resolver(self) -> None:
        resolver = _CountingResolver({})
        registry = ClassRegistry(resolver)
        registry.define(_Thing)
        assert registry.get("_Thing") is _Thing
        assert resolver.calls == []

    def test_define_with_name(self) -> None:
        registry = ClassRegistry(_CountingResolver({}))
        registry.define(_Thing, "Kitchen\\Thing")
        assert "Kitchen\\Thing" in registry

    def test_create_passes_arguments(self) -> None:
        registry = ClassRegistry(_CountingResolver({"Thing": _Thing}))
        thing = registry.create("Thing", size=3)
        assert isinstance(thing, _Thing)
        assert thing.size == 3

    def test_failure_leaves_name_undefined(self) -> None:
        resolver = _CountingResolver({})
        registry = ClassRegistry(resolver)
        with pytest.raises(ClassNotFound):
            registry.create("Ghost")
        assert "Ghost" not in registry
        assert len(registry) == 0

    def test_names_in_definition_order(self) -> None:
        registry = ClassRegistry(_CountingResolver({"B": _Thing, "A": _Thing}))
        registry.get("B")
        registry.get("A")
        assert registry.names() == ["B", "A"]
        assert list(registry) == ["B", "A"]


class TestCanonicalNames:
    def test_fully_qualified_spelling_is_same_class(self) -> None:
        resolver = _CountingResolver({"Cat": _Thing, "\\Cat": _Thing})
        registry = ClassRegistry(resolver)
        assert registry.get("\\Cat") is registry.get("Cat")
        assert resolver.calls == ["Cat"]

    def test_dotted_and_backslash_namespaces_match(self) -> None:
        resolver = _CountingResolver({"Kitchen\\Fridge": _Thing})
        registry = ClassRegistry(resolver)
        registry.get("Kitchen\\Fridge")
        registry.get("Kitchen.Fridge")
        registry.get("\\Kitchen\\Fridge")
        assert resolver.calls == ["Kitchen\\Fridge"]
        assert registry.names() == ["Kitchen\\Fridge"]

    def test_contains_any_spelling(self) -> None:
        registry = ClassRegistry(_CountingResolver({}))
        registry.define(_Thing, "Kitchen.Thing")
        assert "Kitchen\\Thing" in registry
        assert "\\Kitchen\\Thing" in registry

    def test_contains_malformed_name(self) -> None:
        registry = ClassRegistry(_CountingResolver({}))
        assert "Kitchen..Thing" not in registry
        assert 3 not in registry

    def test_get_malformed_name_skips_resolver(self) -> None:
        resolver = _CountingResolver({})
        registry = ClassRegistry(resolver)
        with pytest.raises(ValueError, match="empty namespace segment"):
            registry.get("Kitchen..Thing")
        assert resolver.calls == []
