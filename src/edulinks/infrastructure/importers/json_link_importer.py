from __future__ import annotations

import json
from pathlib import Path

from edulinks.domain.models.import_entry import ImportEntry


class LinkJsonError(ValueError):
    pass


def load_link_rows_from_json(path: Path) -> list[object]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise LinkJsonError(f"Invalid JSON: {exc}") from exc

    if isinstance(payload, list):
        return payload

    if isinstance(payload, dict):
        for key in ("links", "resources"):
            rows = payload.get(key)
            if isinstance(rows, list):
                return rows

    raise LinkJsonError("JSON must be a list of link objects or an object containing 'links'.")


def parse_import_entry(row: object) -> ImportEntry:
    if not isinstance(row, dict):
        raise LinkJsonError("Each link entry must be a JSON object.")

    title = _optional_str(row, "title")
    url = _optional_str(row, "url")
    if not title or not url:
        raise LinkJsonError("Link entry requires non-empty 'title' and 'url'.")

    return ImportEntry(
        title=title,
        url=url,
        description=_optional_str(row, "description") or "",
        category=_optional_str(row, "category"),
        year=_optional_int(row, "year"),
        tags=_tags(row.get("tags")),
        free=_optional_bool(row, "free"),
    )


def _optional_str(row: dict[str, object], key: str) -> str | None:
    value = row.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise LinkJsonError(f"Field '{key}' must be a string.")
    return value.strip()


def _optional_int(row: dict[str, object], key: str) -> int | None:
    value = row.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise LinkJsonError(f"Field '{key}' must be an integer.")
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise LinkJsonError(f"Field '{key}' must be an integer.") from exc


def _optional_bool(row: dict[str, object], key: str) -> bool | None:
    value = row.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise LinkJsonError(f"Field '{key}' must be true or false.")


def _tags(value: object) -> frozenset[str] | None:
    if value is None:
        return None
    if isinstance(value, str):
        pieces = value.split(",")
    elif isinstance(value, list) and all(isinstance(item, str) for item in value):
        pieces = value
    else:
        raise LinkJsonError("Field 'tags' must be a list of strings or a comma-separated string.")
    tags = frozenset(piece.strip() for piece in pieces if piece.strip())
    return tags or None
