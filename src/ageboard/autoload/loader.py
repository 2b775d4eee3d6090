"""Autoloader — loads a class from the file its name maps to.

Modeled on the pages discovery loader: the file is executed as an
anonymous module via ``importlib.util.spec_from_file_location`` and the
expected symbol is read off the resulting module.
"""

import importlib.util
import logging
from pathlib import Path

from ageboard.autoload.resolve import class_path, short_name
from ageboard.errors import ClassNotFound

logger = logging.getLogger("ageboard.autoload")


def load_class(path: Path, class_name: str) -> type:
    """Execute the file at *path* and return the class it defines.

    Args:
        path: Source file expected to define the class.
        class_name: The (possibly namespaced) class name being resolved.

    Raises:
        ClassNotFound: If the file is missing, cannot be loaded, or does
            not define a class named ``short_name(class_name)``.
    """
    if not path.is_file():
        raise ClassNotFound(class_name, path, "no such file")

    symbol = short_name(class_name)
    module_name = "_ageboard_autoload_" + "_".join(class_path(class_name, suffix="").parts)
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ClassNotFound(class_name, path, "file is not loadable as a module")

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    cls = getattr(module, symbol, None)
    if not isinstance(cls, type):
        raise ClassNotFound(class_name, path, f"file does not define class {symbol!r}")
    return cls


class Autoloader:
    """Resolver that maps a class name to one file under *root* and loads it.

    Each call makes exactly one load attempt at the derived path.  There
    is no cache and no fallback search path; callers that want a class
    defined only once go through :class:`~ageboard.autoload.ClassRegistry`.

    The relative path of every attempt is recorded in :attr:`trace`, in
    call order, and logged at DEBUG before the load.

    Usage::

        autoload = Autoloader("classes")
        Cat = autoload("Cat")            # loads classes/Cat.py
        autoload.trace                   # ["Cat.py"]
    """

    __slots__ = ("_root", "_suffix", "trace")

    def __init__(self, root: str | Path, *, suffix: str = ".py") -> None:
        self._root = Path(root).resolve()
        self._suffix = suffix
        self.trace: list[str] = []

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, class_name: str) -> Path:
        """Absolute path the autoloader will load for *class_name*."""
        return self._root / class_path(class_name, suffix=self._suffix)

    def __call__(self, class_name: str) -> type:
        relative = class_path(class_name, suffix=self._suffix)
        self.trace.append(relative.as_posix())
        logger.debug("autoload %s -> %s", class_name, relative.as_posix())
        return load_class(self._root / relative, class_name)
