from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class Record:
    """One saved link to an educational resource."""

    title: str
    url: str
    description: str
    added: date
    accessed: date
    tags: frozenset[str] | None = None
