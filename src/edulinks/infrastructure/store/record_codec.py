from __future__ import annotations

import tomllib
from datetime import date, datetime

from edulinks.core.normalize import parse_iso_date
from edulinks.domain.models.record import Record

FIELD_ORDER = ("title", "link", "desc", "added", "accessed")

_BASIC_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\f": "\\f",
    "\r": "\\r",
}


class RecordCodecError(ValueError):
    pass


def quote(value: str) -> str:
    """Render ``value`` as a double-quoted TOML basic string."""
    out: list[str] = []
    for ch in value:
        escaped = _BASIC_ESCAPES.get(ch)
        if escaped is not None:
            out.append(escaped)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def encode_record(record: Record) -> str:
    values = (
        record.title,
        record.url,
        record.description,
        record.added.isoformat(),
        record.accessed.isoformat(),
    )
    lines = [f"{key} = {quote(value)}" for key, value in zip(FIELD_ORDER, values)]
    if record.tags is not None:
        lines.append(f"tags = [{', '.join(quote(tag) for tag in sorted(record.tags))}]")
    return "\n".join(lines) + "\n"


def decode_record(text: str) -> Record:
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise RecordCodecError(f"Malformed record: {exc}") from exc

    return Record(
        title=_string_field(data, "title"),
        url=_string_field(data, "link"),
        description=_string_field(data, "desc"),
        added=_date_field(data, "added"),
        accessed=_date_field(data, "accessed"),
        tags=_tags_field(data),
    )


def _string_field(data: dict[str, object], key: str) -> str:
    value = data.get(key, "")
    if not isinstance(value, str):
        raise RecordCodecError(f"Field '{key}' must be a string, got {type(value).__name__}")
    return value


def _date_field(data: dict[str, object], key: str) -> date:
    if key not in data:
        raise RecordCodecError(f"Missing date field '{key}'")
    value = data[key]
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        parsed = parse_iso_date(value.strip())
        if parsed is not None:
            return parsed
    raise RecordCodecError(f"Field '{key}' is not a YYYY-MM-DD date: {value!r}")


def _tags_field(data: dict[str, object]) -> frozenset[str] | None:
    if "tags" not in data:
        return None
    value = data["tags"]
    if not isinstance(value, list) or not all(isinstance(tag, str) for tag in value):
        raise RecordCodecError("Field 'tags' must be an array of strings")
    return frozenset(value)
