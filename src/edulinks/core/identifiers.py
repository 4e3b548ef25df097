"""Filesystem-safe identifiers derived from record titles.

An identifier is never stored; it is recomputed from the title whenever a
record is written or repaired, and used as the record's filename stem.
"""

from __future__ import annotations

import re

from unidecode import unidecode

from edulinks.core.hashing import compute_text_digest

SEPARATOR = "-"

UNSAFE_CHARACTERS = frozenset(
    "/\\:;*?\"<>|'`"
    "()+&^#@$%=._,!~[]{}"
)

_OUTSIDE_ALPHABET_RE = re.compile(r"[^a-z0-9-]")
_SEPARATOR_RUN_RE = re.compile(r"-{2,}")
_FALLBACK_PREFIX = "untitled"
_FALLBACK_DIGEST_CHARS = 12


def transliterate(text: str) -> str:
    """Closest plain ASCII spelling of ``text``, including non-Latin scripts."""
    return unidecode(text)


def sanitize_title(title: str) -> str:
    """Map an arbitrary title onto the ``[a-z0-9-]`` alphabet.

    Unsafe punctuation and whitespace become ``-``, the result is lowercased,
    and runs of separators collapse to one. Leading and trailing separators
    are left in place; see :func:`record_identifier` for the storage key.
    """
    ascii_title = transliterate(title)
    replaced = "".join(
        SEPARATOR if ch in UNSAFE_CHARACTERS or ch.isspace() else ch for ch in ascii_title
    )
    lowered = _OUTSIDE_ALPHABET_RE.sub(SEPARATOR, replaced.lower())
    return _SEPARATOR_RUN_RE.sub(SEPARATOR, lowered)


def is_degenerate(identifier: str) -> bool:
    return not any(ch.isalnum() for ch in identifier)


def record_identifier(title: str) -> str:
    """Return the storage key for a record titled ``title``.

    Titles that sanitize to nothing but separators (for example ``"!!!"`` or
    a title made only of emoji) fall back to
    ``untitled-<sha256 prefix>`` so distinct titles still get distinct keys.
    """
    identifier = sanitize_title(title).strip(SEPARATOR)
    if is_degenerate(identifier):
        digest = compute_text_digest(title)[:_FALLBACK_DIGEST_CHARS]
        return f"{_FALLBACK_PREFIX}{SEPARATOR}{digest}"
    return identifier
