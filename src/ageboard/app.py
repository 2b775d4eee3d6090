"""Ageboard application class.

Wires configuration, autoloader, registry, and renderer together for a
single page render.  Nothing is shared between renders: each call to
``render()`` gets a fresh autoloader and class registry.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from kida import Environment

from ageboard.autoload.loader import Autoloader
from ageboard.autoload.registry import ClassRegistry
from ageboard.autoload.resolve import class_path
from ageboard.config import PageConfig
from ageboard.errors import ConfigurationError
from ageboard.page.context import build_page
from ageboard.page.renderer import create_environment, render_page
from ageboard.page.types import AgePage

logger = logging.getLogger("ageboard.app")


class App:
    """The ageboard application.

    Usage::

        app = App(PageConfig(classes_dir="classes"))
        html = app.render()

    The kida environment is created on first render and reused; class
    resolution state is not.
    """

    __slots__ = ("_env", "config")

    def __init__(self, config: PageConfig | None = None, *, env: Environment | None = None) -> None:
        self.config: PageConfig = config or PageConfig()
        self._env: Environment | None = env

    @property
    def env(self) -> Environment:
        if self._env is None:
            self._env = create_environment(self.config)
        return self._env

    def check(self, ages: Sequence[tuple[str, int]] | None = None) -> None:
        """Validate the configuration.

        Args:
            ages: ``(class name, age)`` pairs to validate instead of
                ``config.ages``.

        Raises:
            ConfigurationError: If the classes directory is missing, the
                class suffix is malformed, or a class name is malformed.
        """
        classes_dir = Path(self.config.classes_dir)
        if not classes_dir.is_dir():
            msg = f"Classes directory not found: {classes_dir.resolve()}"
            raise ConfigurationError(msg)
        suffix = self.config.class_suffix
        if not suffix.startswith(".") or len(suffix) < 2:
            msg = f"Class suffix must look like '.py', got {suffix!r}"
            raise ConfigurationError(msg)
        for name, _ in self.config.ages if ages is None else ages:
            try:
                class_path(name, suffix=suffix)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

    def build(self, ages: Sequence[tuple[str, int]] | None = None) -> AgePage:
        """Resolve, construct, and age every configured object.

        Args:
            ages: ``(class name, age)`` pairs overriding ``config.ages``.
        """
        self.check(ages)
        autoload = Autoloader(self.config.classes_dir, suffix=self.config.class_suffix)
        registry = ClassRegistry(autoload)
        page = build_page(
            registry,
            self.config.ages if ages is None else ages,
            title=self.config.title,
            trace=autoload.trace,
        )
        logger.debug("built page with %d entries from %s", len(page.entries), autoload.root)
        return page

    def render(self, ages: Sequence[tuple[str, int]] | None = None) -> str:
        """Render the full HTML page.

        Either returns the complete document or raises; there is no
        partial output.
        """
        page = self.build(ages)
        return render_page(
            self.env,
            page,
            template_name=self.config.template_name,
            debug=self.config.debug,
        )
