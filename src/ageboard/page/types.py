"""Data models for the rendered page.

Immutable frozen dataclasses built once per render and handed to the
template as context.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AgeEntry:
    """One line of the page.

    Attributes:
        label: Unqualified class name (``Cat``, ``Fridge``).
        age: Value read back with ``get_age()`` after ``set_age()``.
    """

    label: str
    age: int


@dataclass(frozen=True, slots=True)
class AgePage:
    """Everything the page template renders.

    Attributes:
        title: Document title and heading.
        entries: Age lines in configured order.
        trace: Autoload paths in load order.  Rendered only in debug mode.
    """

    title: str
    entries: tuple[AgeEntry, ...] = ()
    trace: tuple[str, ...] = ()
