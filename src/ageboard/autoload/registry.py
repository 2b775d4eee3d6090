"""Class registry — the construction context for autoloaded classes.

Holds the classes defined so far and consults the injected resolver only
for names it does not know yet.  This replaces a process-wide autoload
hook: whoever builds objects is handed a registry, and the registry is
handed its resolver.

Names are keyed by :func:`~ageboard.autoload.resolve.canonical_name`, so
``\\Cat`` and ``Cat`` (or ``Kitchen\\Fridge`` and ``Kitchen.Fridge``) are
the same class.
"""

from collections.abc import Callable, Iterator
from typing import Any

from ageboard.autoload.resolve import canonical_name

Resolver = Callable[[str], type]


class ClassRegistry:
    """Name-to-class table backed by a resolver.

    Usage::

        registry = ClassRegistry(Autoloader("classes"))
        cat = registry.create("Cat")      # resolver called once
        other = registry.create("\\Cat")  # already defined, no resolver call
    """

    __slots__ = ("_classes", "_resolver")

    def __init__(self, resolver: Resolver) -> None:
        self._resolver = resolver
        self._classes: dict[str, type] = {}

    def define(self, cls: type, name: str | None = None) -> None:
        """Register an already-defined class under *name* (default: its ``__name__``)."""
        self._classes[canonical_name(name or cls.__name__)] = cls

    def get(self, name: str) -> type:
        """Return the class for *name*, resolving it on first reference.

        A resolver failure propagates and leaves *name* undefined.

        Raises:
            ValueError: If *name* is malformed (see ``class_path``).
        """
        key = canonical_name(name)
        cls = self._classes.get(key)
        if cls is None:
            cls = self._resolver(name)
            self._classes[key] = cls
        return cls

    def create(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Construct an instance of the class named *name*."""
        return self.get(name)(*args, **kwargs)

    def names(self) -> list[str]:
        """Defined class names in canonical form, in definition order."""
        return list(self._classes)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        try:
            return canonical_name(name) in self._classes
        except ValueError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._classes)

    def __len__(self) -> int:
        return len(self._classes)
