"""Page building — construct the aged things and read their ages back."""

from collections.abc import Iterable, Sequence

from ageboard.aged import AgedThing
from ageboard.autoload.registry import ClassRegistry
from ageboard.autoload.resolve import short_name
from ageboard.errors import ConfigurationError
from ageboard.page.types import AgeEntry, AgePage


def build_page(
    registry: ClassRegistry,
    ages: Sequence[tuple[str, int]],
    *,
    title: str,
    trace: Iterable[str] = (),
) -> AgePage:
    """Build the page model for one render.

    Every object is constructed before any age is set, so all class
    resolution happens up front.  Each object then gets exactly one
    ``set_age()`` followed by one ``get_age()``.

    Args:
        registry: Construction context; resolves undefined class names.
        ages: ``(class name, age)`` pairs, in render order.
        title: Page title.
        trace: Autoload paths to show in debug mode.

    Raises:
        ClassNotFound: If a class name cannot be resolved.
        ConfigurationError: If a resolved class is not an ``AgedThing``.
        InvalidAge: If an age is not an ``int``.
    """
    things = [(name, registry.create(name)) for name, _ in ages]

    entries: list[AgeEntry] = []
    for (name, thing), (_, age) in zip(things, ages, strict=True):
        if not isinstance(thing, AgedThing):
            msg = f"{name!r} resolved to {type(thing).__name__}, which has no set_age/get_age"
            raise ConfigurationError(msg)
        thing.set_age(age)
        entries.append(AgeEntry(label=short_name(name), age=thing.get_age()))

    return AgePage(title=title, entries=tuple(entries), trace=tuple(trace))
