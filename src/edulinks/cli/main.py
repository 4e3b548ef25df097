from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console

from edulinks.cli.commands import (
    add_cmd,
    import_cmd,
    init_cmd,
    menu_cmd,
    repair_cmd,
    validate_cmd,
)
from edulinks.cli.context import CLIContext
from edulinks.core.config import load_config, with_overrides
from edulinks.core.errors import EdulinksError
from edulinks.core.logging import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edulinks",
        description="Keep a collection of links to educational resources as TOML records",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        default=Path.cwd(),
        help="Directory holding the records folder (default: current working directory)",
    )
    parser.add_argument(
        "--records-dir",
        type=Path,
        default=None,
        help="Record directory (default: $EDULINKS_HOME or <project-root>/toml)",
    )
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Do not fetch page meta descriptions when adding links",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0)

    subparsers = parser.add_subparsers(dest="command", required=True)
    init_cmd.register(subparsers)
    add_cmd.register(subparsers)
    validate_cmd.register(subparsers)
    import_cmd.register(subparsers)
    repair_cmd.register(subparsers)
    menu_cmd.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    console = Console()

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 2

    try:
        config = with_overrides(
            load_config(args.project_root),
            records_dir=args.records_dir,
            strict_description=getattr(args, "strict_description", None),
            fetch_descriptions=False if args.no_fetch else None,
        )
        ctx = CLIContext(config=config, console=console)
        return handler(args, ctx)
    except EdulinksError as exc:
        logger.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
