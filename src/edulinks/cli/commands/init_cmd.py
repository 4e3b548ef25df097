from __future__ import annotations

import argparse

from edulinks.cli.context import CLIContext


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("init", help="Create the record directory")
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    report_layout(ctx)
    return 0


def report_layout(ctx: CLIContext) -> None:
    if ctx.store().ensure_layout():
        ctx.console.print(f"[green]Created[/green] {ctx.config.records_dir}")
    else:
        ctx.console.print(f"[yellow]Found existing directory at[/yellow] {ctx.config.records_dir}")
