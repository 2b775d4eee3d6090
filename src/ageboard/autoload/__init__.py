"""Class autoloading — class names resolved to source files on first use.

A class name maps to exactly one file under the autoload root::

    Cat              -> <root>/Cat.py
    Kitchen\\Fridge  -> <root>/Kitchen/Fridge.py
    kitchen.Fridge   -> <root>/kitchen/Fridge.py

Usage::

    registry = ClassRegistry(Autoloader("classes"))
    cat = registry.create("Cat")

The registry only calls the resolver for names it has not defined yet.
The resolver itself never caches.
"""

from ageboard.autoload.loader import Autoloader, load_class
from ageboard.autoload.registry import ClassRegistry, Resolver
from ageboard.autoload.resolve import canonical_name, class_path, short_name

__all__ = [
    "Autoloader",
    "ClassRegistry",
    "Resolver",
    "canonical_name",
    "class_path",
    "load_class",
    "short_name",
]
