"""Page configuration.

PageConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

# Cat.py and Fridge.py ship with the package
BUILTIN_CLASSES_DIR = Path(__file__).parent / "classes"

DEFAULT_AGES: tuple[tuple[str, int], ...] = (("Cat", 22), ("Fridge", 2))


@dataclass(frozen=True, slots=True)
class PageConfig:
    """Page configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PageConfig(classes_dir="classes", ages=(("Cat", 9),), debug=True)
    """

    # Autoloading
    classes_dir: str | Path = BUILTIN_CLASSES_DIR
    class_suffix: str = ".py"

    # Page content — (class name, age) pairs, rendered in order
    ages: tuple[tuple[str, int], ...] = DEFAULT_AGES
    title: str = "Cat and Fridge Age"

    # Templates
    template_dir: str | Path | None = None  # Checked before the built-in templates
    template_name: str = "index.html"
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True

    # Diagnostics — debug renders the autoload trace into the page
    debug: bool = False
    log_level: str = "warning"
