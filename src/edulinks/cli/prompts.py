"""Interactive collection of link fields.

Prompting only gathers raw strings into a :class:`LinkInput`; all
normalization happens afterwards in the link service.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Prompt

from edulinks.application.services.link_service import LinkService
from edulinks.core.normalize import LinkInput

ADDED_PROMPT = "Date (YYYY-MM-DD) the resource was added to bookmarks (leave empty for today)"
ACCESSED_PROMPT = "Date (YYYY-MM-DD) the resource was last accessed (leave empty for today)"
TAGS_PROMPT = 'Tags (separated by a comma ",") or leave blank'


def ask(console: Console, label: str, default: str = "") -> str:
    return Prompt.ask(label, console=console, default=default, show_default=bool(default))


def collect_link_input(
    console: Console,
    service: LinkService,
    *,
    title: str | None = None,
    url: str | None = None,
    description: str | None = None,
    added: str | None = None,
    accessed: str | None = None,
    tags: str | None = None,
    interactive: bool = True,
) -> LinkInput:
    """Ask for every field that was not supplied.

    With ``interactive=False`` nothing is asked: missing dates and tags stay
    empty and the description falls back to the fetched suggestion.
    """

    def field(value: str | None, label: str, default: str = "") -> str:
        if value is not None:
            return value
        return ask(console, label, default) if interactive else default

    title = field(title, "Title")
    url = field(url, "URL")

    if description is None:
        suggestion = service.suggest_description(url)
        if suggestion and interactive:
            console.print(f"[dim]Suggested description:[/dim] {suggestion}")
        description = field(None, "Description (press enter to use the suggestion)", suggestion)

    return LinkInput(
        title=title,
        url=url,
        description=description,
        added=field(added, ADDED_PROMPT),
        accessed=field(accessed, ACCESSED_PROMPT),
        tags=field(tags, TAGS_PROMPT) or None,
    )
