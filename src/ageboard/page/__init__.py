"""The age page — model, builder, and kida rendering.

Usage::

    page = build_page(registry, [("Cat", 22), ("Fridge", 2)], title="Ages")
    html = render_page(create_environment(config), page)
"""

from ageboard.page.context import build_page
from ageboard.page.renderer import create_environment, render_page
from ageboard.page.types import AgeEntry, AgePage

__all__ = [
    "AgeEntry",
    "AgePage",
    "build_page",
    "create_environment",
    "render_page",
]
