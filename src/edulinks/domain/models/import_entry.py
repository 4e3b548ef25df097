from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ImportEntry:
    title: str
    url: str
    description: str
    category: str | None = None
    year: int | None = None
    tags: frozenset[str] | None = None
    free: bool | None = None
