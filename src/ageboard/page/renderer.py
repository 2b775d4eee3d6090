"""Kida environment setup and page rendering.

The environment looks in the user's ``template_dir`` first and falls
back to the templates shipped in this package, so a project can
override ``index.html`` without touching anything else.
"""

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from ageboard.config import PageConfig
from ageboard.page.types import AgePage


def create_environment(config: PageConfig) -> Environment:
    """Create a kida Environment from page configuration."""
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("ageboard.page", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def render_page(
    env: Environment,
    page: AgePage,
    *,
    template_name: str = "index.html",
    debug: bool = False,
) -> str:
    """Render *page* to an HTML string."""
    template = env.get_template(template_name)
    return template.render(
        {
            "title": page.title,
            "entries": page.entries,
            "trace": page.trace if debug else (),
        }
    )
