"""Ageboard CLI — render the age page.

Entry point registered as ``ageboard`` in ``pyproject.toml``::

    [project.scripts]
    ageboard = "ageboard.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``ageboard`` command."""
    parser = argparse.ArgumentParser(
        prog="ageboard",
        description="Ageboard — render the ages of autoloaded things as HTML.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- ageboard render ---------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render the page to HTML")
    render_parser.add_argument(
        "--classes-dir",
        default=None,
        help="Autoload root (default: the bundled Cat/Fridge classes)",
    )
    render_parser.add_argument(
        "--age",
        action="append",
        default=None,
        metavar="NAME=N",
        help="Class name and age, repeatable (default: Cat=22 Fridge=2)",
    )
    render_parser.add_argument("--title", default=None, help="Page title")
    render_parser.add_argument(
        "--template-dir",
        default=None,
        help="Directory checked for templates before the built-in ones",
    )
    render_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write HTML to this file instead of stdout",
    )
    render_parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the autoload trace in the page",
    )
    render_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: warning, debug with --debug)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "render":
        from ageboard.cli._render import run_render

        run_render(args)
