from __future__ import annotations

import argparse
import logging

from rich.prompt import Prompt

from edulinks.cli.commands import add_cmd, init_cmd, validate_cmd
from edulinks.cli.context import CLIContext
from edulinks.core.errors import InvalidLinkError

logger = logging.getLogger(__name__)

MENU_PROMPT = "Choose: (V)alidate all links. (C)ontinue adding links. (Q)uit."


def register(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    parser = subparsers.add_parser("menu", help="Interactive add/validate loop")
    parser.add_argument(
        "--strict-description",
        action="store_true",
        default=None,
        help="Treat an empty description as an error instead of a warning",
    )
    parser.set_defaults(handler=run)


def run(args: argparse.Namespace, ctx: CLIContext) -> int:
    init_cmd.report_layout(ctx)

    while True:
        try:
            answer = Prompt.ask(MENU_PROMPT, console=ctx.console)
        except (EOFError, KeyboardInterrupt):
            ctx.console.print()
            break

        choice = answer.strip().lower()
        if choice == "q":
            break
        if choice == "v":
            validate_cmd.print_report(ctx, ctx.validation_service().validate_all())
        elif choice == "c":
            try:
                add_cmd.run_interactive(ctx)
            except (EOFError, KeyboardInterrupt):
                ctx.console.print("\n[yellow]Link not saved.[/yellow]")
            except InvalidLinkError as exc:
                logger.error(str(exc))
        else:
            ctx.console.print("Invalid choice.")

    return 0
