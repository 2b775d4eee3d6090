"""Fridge — autoloaded as ``Fridge``."""

from ageboard.aged import Aged


class Fridge(Aged):
    """A fridge. Ages in years since purchase."""

    __slots__ = ()
