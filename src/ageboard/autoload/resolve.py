"""Class name to file path mapping.

Pure string transformation: namespace separators become path
separators and the class suffix is appended.  Nothing here touches
the filesystem.
"""

import re
from pathlib import Path

# Backslash namespaces (Kitchen\Fridge) and dotted names (kitchen.Fridge)
_SEPARATOR_RE = re.compile(r"[\\.]")


def _segments(class_name: str) -> list[str]:
    if not class_name:
        raise ValueError("Class name must not be empty")
    # Fully-qualified form: \Kitchen\Fridge
    name = class_name[1:] if class_name.startswith("\\") else class_name
    parts = _SEPARATOR_RE.split(name)
    if not all(parts):
        msg = f"Class name {class_name!r} contains an empty namespace segment"
        raise ValueError(msg)
    return parts


def class_path(class_name: str, *, suffix: str = ".py") -> Path:
    """Map a class name to its source file, relative to the autoload root.

    Args:
        class_name: Class name, optionally namespaced with ``\\`` or ``.``.
        suffix: File suffix appended to the last segment.

    Returns:
        Relative path such as ``Kitchen/Fridge.py``.

    Raises:
        ValueError: If the name or one of its segments is empty.
    """
    *namespace, name = _segments(class_name)
    return Path(*namespace, name + suffix)


def short_name(class_name: str) -> str:
    """The unqualified class name — the symbol the resolved file must define."""
    return _segments(class_name)[-1]


def canonical_name(class_name: str) -> str:
    """The single spelling of a class name: backslash namespaces, no leading ``\\``.

    ``\\Kitchen\\Fridge``, ``Kitchen\\Fridge`` and ``Kitchen.Fridge`` all
    become ``Kitchen\\Fridge``.
    """
    return "\\".join(_segments(class_name))
