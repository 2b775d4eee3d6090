"""Things with an age.

``AgedThing`` is the capability the page renders: anything with
``set_age()`` and ``get_age()``.  ``Aged`` is the shared implementation
the bundled classes build on.
"""

from typing import Protocol, runtime_checkable

from ageboard.errors import InvalidAge

# Returned by get_age() before the first set_age()
DEFAULT_AGE = 0


@runtime_checkable
class AgedThing(Protocol):
    """Anything exposing an integer age through a setter and a getter."""

    def set_age(self, age: int) -> None: ...

    def get_age(self) -> int: ...


def check_age(value: object) -> int:
    """Return *value* if it is an ``int``, else raise :class:`InvalidAge`.

    ``bool`` is rejected even though it subclasses ``int``.  Negative
    values are accepted; there is no bounds check.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidAge(value)
    return value


class Aged:
    """Base class holding a single integer age.

    Usage::

        thing = Aged()
        thing.get_age()    # 0
        thing.set_age(22)
        thing.get_age()    # 22
    """

    __slots__ = ("_age",)

    def __init__(self) -> None:
        self._age: int = DEFAULT_AGE

    def set_age(self, age: int) -> None:
        self._age = check_age(age)

    def get_age(self) -> int:
        return self._age

    @property
    def age(self) -> int:
        return self._age

    def __repr__(self) -> str:
        return f"{type(self).__name__}(age={self._age})"
