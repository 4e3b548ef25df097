from __future__ import annotations

import argparse
from pathlib import Path

from rich.panel import Panel

from edulinks.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("import-json", help="Import links from a JSON export")
    parser.add_argument("json_path", help="Path to a JSON list of link objects")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    summary = ctx.link_service().import_json(Path(args.json_path))

    panel = Panel.fit(
        "\n".join(
            [
                f"Rows seen: {summary.rows_seen}",
                f"Records written: {summary.written}",
                f"Rows skipped: {summary.skipped}",
                f"Existing records replaced: {summary.collisions}",
            ]
        ),
        title="JSON Import Summary",
    )
    ctx.console.print(panel)
    return 0
