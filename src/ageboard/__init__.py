"""Ageboard — render the ages of autoloaded things into an HTML page.

Basic usage::

    from ageboard import App, PageConfig

    app = App(PageConfig(ages=(("Cat", 22), ("Fridge", 2))))
    print(app.render())

Classes are never imported directly.  ``Cat`` is loaded from
``<classes_dir>/Cat.py`` the first time the page needs one.
"""

__version__ = "0.1.0"
__all__ = [
    "AgeboardError",
    "Aged",
    "AgedThing",
    "App",
    "Autoloader",
    "ClassNotFound",
    "ClassRegistry",
    "ConfigurationError",
    "InvalidAge",
    "PageConfig",
]

_LAZY_IMPORTS: dict[str, str] = {
    "AgeboardError": "ageboard.errors",
    "Aged": "ageboard.aged",
    "AgedThing": "ageboard.aged",
    "App": "ageboard.app",
    "Autoloader": "ageboard.autoload.loader",
    "ClassNotFound": "ageboard.errors",
    "ClassRegistry": "ageboard.autoload.registry",
    "ConfigurationError": "ageboard.errors",
    "InvalidAge": "ageboard.errors",
    "PageConfig": "ageboard.config",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import ageboard`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)
