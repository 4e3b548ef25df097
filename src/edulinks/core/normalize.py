"""Turn raw field strings into a canonical :class:`Record`.

Date fields accept ``YYYY-MM-DD``; an empty value or the sentinel ``x`` means
"today". Anything else that fails to parse is reported as a warning and also
becomes today, so building a record never fails on a bad date.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from edulinks.core.time import Clock, today_local
from edulinks.domain.models.record import Record

logger = logging.getLogger(__name__)

TODAY_SENTINEL = "x"
TAG_DELIMITER = ","

_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


@dataclass(slots=True)
class LinkInput:
    """Field values as collected from a prompt, a flag, or an import row."""

    title: str
    url: str
    description: str = ""
    added: str = ""
    accessed: str = ""
    tags: str | Iterable[str] | None = None


def parse_iso_date(value: str) -> date | None:
    match = _ISO_DATE_RE.match(value)
    if match is None:
        return None
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def resolve_date(raw: str | None, *, today: date, field: str) -> date:
    value = (raw or "").strip()
    if not value or value.casefold() == TODAY_SENTINEL:
        return today
    parsed = parse_iso_date(value)
    if parsed is None:
        logger.warning(
            "Invalid date %r for '%s' (expected YYYY-MM-DD); using %s instead.",
            value,
            field,
            today.isoformat(),
        )
        return today
    return parsed


def parse_tags(raw: str | Iterable[str] | None) -> frozenset[str] | None:
    if raw is None:
        return None
    pieces = raw.split(TAG_DELIMITER) if isinstance(raw, str) else raw
    tags = frozenset(piece.strip() for piece in pieces if piece and piece.strip())
    return tags or None


def normalize_record(
    title: str,
    url: str,
    description: str,
    added_raw: str | None,
    accessed_raw: str | None,
    tags: str | Iterable[str] | None = None,
    *,
    clock: Clock = today_local,
) -> Record:
    today = clock()
    return Record(
        title=title.strip(),
        url=url.strip(),
        description=(description or "").strip(),
        added=resolve_date(added_raw, today=today, field="added"),
        accessed=resolve_date(accessed_raw, today=today, field="accessed"),
        tags=parse_tags(tags),
    )


def normalize_input(link_input: LinkInput, *, clock: Clock = today_local) -> Record:
    return normalize_record(
        link_input.title,
        link_input.url,
        link_input.description,
        link_input.added,
        link_input.accessed,
        link_input.tags,
        clock=clock,
    )
