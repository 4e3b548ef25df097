from __future__ import annotations

import argparse

from rich.table import Table

from edulinks.cli.context import CLIContext
from edulinks.domain.models.validation import ValidationReport


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("validate", help="Validate every stored record")
    parser.add_argument(
        "--strict-description",
        action="store_true",
        default=None,
        help="Treat an empty description as an error instead of a warning",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    report = ctx.validation_service().validate_all()
    print_report(ctx, report)
    return 0 if report.ok else 1


def print_report(ctx: CLIContext, report: ValidationReport) -> None:
    if not report.outcomes:
        ctx.console.print(f"[yellow]No records found in[/yellow] {ctx.config.records_dir}")
        return

    table = Table(title=f"Validation ({len(report.outcomes)} records)")
    table.add_column("#", justify="right")
    table.add_column("Identifier", overflow="fold")
    table.add_column("Status")
    table.add_column("Issues", overflow="fold")

    for index, outcome in enumerate(report.outcomes, start=1):
        result = outcome.result
        status = "[green]valid[/green]" if result.is_valid else "[red]invalid[/red]"
        issues = "; ".join(f"{issue.level}: {issue.message}" for issue in result.issues)
        table.add_row(str(index), outcome.identifier, status, issues)
    ctx.console.print(table)

    if report.ok:
        ctx.console.print("[green]No errors found.[/green]")
    else:
        ctx.console.print(f"[red]Errors found in {len(report.invalid)} record(s).[/red]")
