from __future__ import annotations

import argparse

from rich.panel import Panel

from edulinks.application.services.link_service import AddResult
from edulinks.cli.context import CLIContext
from edulinks.cli.prompts import collect_link_input


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("add", help="Add a link, prompting for any field not given")
    parser.add_argument("--title")
    parser.add_argument("--url")
    parser.add_argument("--description")
    parser.add_argument("--added", help="YYYY-MM-DD, empty or 'x' for today")
    parser.add_argument("--accessed", help="YYYY-MM-DD, empty or 'x' for today")
    parser.add_argument("--tags", help="Comma-separated tags")
    parser.add_argument(
        "--no-input",
        action="store_true",
        help="Never prompt; missing fields are left empty",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    service = ctx.link_service()
    link_input = collect_link_input(
        ctx.console,
        service,
        title=args.title,
        url=args.url,
        description=args.description,
        added=args.added,
        accessed=args.accessed,
        tags=args.tags,
        interactive=not args.no_input,
    )
    print_added(ctx, service.add_link(link_input))
    return 0


def run_interactive(ctx: CLIContext) -> AddResult:
    service = ctx.link_service()
    result = service.add_link(collect_link_input(ctx.console, service))
    print_added(ctx, result)
    return result


def print_added(ctx: CLIContext, result: AddResult) -> None:
    record = result.record
    tags = ", ".join(sorted(record.tags)) if record.tags else "-"
    ctx.console.print(
        Panel.fit(
            "\n".join(
                [
                    f"Title: {record.title}",
                    f"URL: {record.url}",
                    f"Description: {record.description or '-'}",
                    f"Added: {record.added.isoformat()}",
                    f"Accessed: {record.accessed.isoformat()}",
                    f"Tags: {tags}",
                ]
            ),
            title="Replaced" if result.replaced else "Saved",
        )
    )
    ctx.console.print(f"[green]Wrote[/green] {result.path}")
