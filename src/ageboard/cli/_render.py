"""``ageboard render`` — render the age page to stdout or a file.

The page is rendered completely in memory before anything is written,
so a failed render leaves no output behind.  Exits with code 1 on any
ageboard error.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from ageboard.app import App
from ageboard.config import PageConfig
from ageboard.errors import AgeboardError

logger = logging.getLogger("ageboard.cli")


def parse_age(value: str) -> tuple[str, int]:
    """Parse a ``NAME=N`` pair.

    Raises:
        argparse.ArgumentTypeError: If the pair is malformed or N is not an integer.
    """
    name, sep, raw_age = value.partition("=")
    if not sep or not name:
        msg = f"expected NAME=N, got {value!r}"
        raise argparse.ArgumentTypeError(msg)
    try:
        age = int(raw_age)
    except ValueError as exc:
        msg = f"age for {name!r} must be an integer, got {raw_age!r}"
        raise argparse.ArgumentTypeError(msg) from exc
    return name, age


def config_from_args(args: argparse.Namespace) -> PageConfig:
    """Build a PageConfig from parsed ``render`` arguments."""
    config = PageConfig(debug=args.debug)
    overrides: dict[str, object] = {}
    if args.classes_dir is not None:
        overrides["classes_dir"] = args.classes_dir
    if args.age:
        overrides["ages"] = tuple(parse_age(value) for value in args.age)
    if args.title is not None:
        overrides["title"] = args.title
    if args.template_dir is not None:
        overrides["template_dir"] = args.template_dir
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    elif args.debug:
        overrides["log_level"] = "debug"
    return replace(config, **overrides)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_render(args: argparse.Namespace) -> None:
    """Render the page described by ``render`` arguments."""
    try:
        config = config_from_args(args)
    except argparse.ArgumentTypeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    configure_logging(config.log_level)

    try:
        html = App(config).render()
    except AgeboardError as exc:
        logger.debug("render failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.output is None:
        sys.stdout.write(html)
        return

    Path(args.output).write_text(html, encoding="utf-8")
    logger.info("wrote %s", args.output)
