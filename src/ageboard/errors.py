"""Ageboard exception hierarchy.

Shared across the autoloader, registry, page builder, and CLI so every
module raises and catches the same types.
"""

from pathlib import Path


class AgeboardError(Exception):
    """Base for all ageboard-specific errors."""


class ConfigurationError(AgeboardError):
    """Raised when page configuration is invalid.

    Typically raised by ``App.render()`` before any class is loaded.
    """


class ClassNotFound(AgeboardError):  # noqa: N818 — mirrors the loader vocabulary
    """A class name could not be resolved to a class.

    Fatal: the render that triggered the lookup is abandoned and no
    output is produced.
    """

    def __init__(self, class_name: str, path: str | Path, reason: str = "") -> None:
        self.class_name = class_name
        self.path = str(path)
        self.reason = reason
        super().__init__(class_name, self.path, reason)

    def __str__(self) -> str:
        if self.reason:
            return f"Class {self.class_name!r} not loaded from {self.path}: {self.reason}"
        return f"Class {self.class_name!r} not loaded from {self.path}"


class InvalidAge(AgeboardError, TypeError):  # noqa: N818
    """An age that is not an ``int`` was passed to ``set_age()``."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"age must be an int, got {type(value).__name__}: {value!r}")
