from __future__ import annotations

import argparse

from rich.panel import Panel

from edulinks.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser(
        "repair",
        help="Re-normalize stored records and rename files to their current identifier",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    summary = ctx.link_service().repair_identifiers()

    panel = Panel.fit(
        "\n".join(
            [
                f"Files seen: {summary.files_seen}",
                f"Renamed: {summary.renamed}",
                f"Rewritten in place: {summary.rewritten}",
                f"Unchanged: {summary.unchanged}",
                f"Unreadable: {summary.failed}",
            ]
        ),
        title="Repair Summary",
    )
    ctx.console.print(panel)
    return 0 if summary.failed == 0 else 1
