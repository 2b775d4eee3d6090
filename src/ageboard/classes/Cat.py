"""Cat — autoloaded as ``Cat``."""

from ageboard.aged import Aged


class Cat(Aged):
    """A cat. Ages in years."""

    __slots__ = ()
