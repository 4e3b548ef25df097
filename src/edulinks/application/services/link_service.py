from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from edulinks.core.errors import InvalidLinkError, LinkImportError, StoreError
from edulinks.core.identifiers import record_identifier
from edulinks.core.normalize import LinkInput, normalize_input, normalize_record
from edulinks.core.time import Clock, today_local
from edulinks.domain.models.record import Record
from edulinks.infrastructure.importers.json_link_importer import (
    LinkJsonError,
    load_link_rows_from_json,
    parse_import_entry,
)
from edulinks.infrastructure.store.record_codec import RecordCodecError, encode_record
from edulinks.infrastructure.store.record_store import RecordStore

logger = logging.getLogger(__name__)

Describer = Callable[[str], str | None]


@dataclass(slots=True)
class AddResult:
    record: Record
    identifier: str
    path: Path
    replaced: bool


@dataclass(slots=True)
class ImportSummary:
    rows_seen: int
    written: int
    skipped: int
    collisions: int


@dataclass(slots=True)
class RepairSummary:
    files_seen: int
    renamed: int
    rewritten: int
    unchanged: int
    failed: int


class LinkService:
    def __init__(
        self,
        store: RecordStore,
        *,
        clock: Clock = today_local,
        describe: Describer | None = None,
    ) -> None:
        self.store = store
        self.clock = clock
        self.describe = describe

    def suggest_description(self, url: str) -> str:
        if self.describe is None or not url.strip():
            return ""
        return self.describe(url) or ""

    def add_link(self, link_input: LinkInput) -> AddResult:
        record = normalize_input(link_input, clock=self.clock)
        missing = [name for name, value in (("title", record.title), ("url", record.url)) if not value]
        if missing:
            raise InvalidLinkError(f"Link not saved: {' and '.join(missing)} must not be empty.")
        return self._write(record)

    def import_json(self, json_path: Path) -> ImportSummary:
        path = json_path.expanduser().resolve()
        if not path.exists() or not path.is_file():
            raise LinkImportError(f"JSON file not found: {path}")

        try:
            rows = load_link_rows_from_json(path)
        except (LinkJsonError, OSError, UnicodeDecodeError) as exc:
            raise LinkImportError(f"Failed to load {path}: {exc}") from exc

        self.store.ensure_layout()
        logger.info("%d links found in %s", len(rows), path)

        written = 0
        skipped = 0
        collisions = 0
        for position, row in enumerate(rows, start=1):
            try:
                entry = parse_import_entry(row)
            except LinkJsonError as exc:
                logger.warning("Skipping import row %d: %s", position, exc)
                skipped += 1
                continue

            record = normalize_record(
                entry.title,
                entry.url,
                entry.description,
                "",
                "",
                entry.tags,
                clock=self.clock,
            )
            result = self._write(record)
            written += 1
            if result.replaced:
                collisions += 1

        return ImportSummary(
            rows_seen=len(rows),
            written=written,
            skipped=skipped,
            collisions=collisions,
        )

    def repair_identifiers(self) -> RepairSummary:
        """Re-normalize stored records and move each to its current identifier."""
        paths = self.store.list_paths()
        renamed = 0
        rewritten = 0
        unchanged = 0
        failed = 0

        for path in paths:
            try:
                stored = self.store.read(path)
            except (RecordCodecError, StoreError) as exc:
                logger.warning("Cannot repair %s: %s", path, exc)
                failed += 1
                continue

            record = Record(
                title=stored.title.strip(),
                url=stored.url.strip(),
                description=stored.description.strip(),
                added=stored.added,
                accessed=stored.accessed,
                tags=_clean_tags(stored.tags),
            )
            target = self.store.path_for(record)

            if target.name == path.name:
                if encode_record(record) == self.store.read_text(path):
                    unchanged += 1
                else:
                    self.store.write(record)
                    rewritten += 1
                continue

            if target.exists():
                logger.warning("Replacing %s with repaired record from %s", target.name, path.name)
            self.store.write(record)
            self.store.remove(path)
            logger.info("Renamed %s -> %s", path.name, target.name)
            renamed += 1

        return RepairSummary(
            files_seen=len(paths),
            renamed=renamed,
            rewritten=rewritten,
            unchanged=unchanged,
            failed=failed,
        )

    def _write(self, record: Record) -> AddResult:
        self.store.ensure_layout()
        identifier = record_identifier(record.title)
        replaced = self.store.exists(record)
        if replaced:
            logger.warning("Record '%s' already exists and will be overwritten.", identifier)
        path = self.store.write(record)
        return AddResult(record=record, identifier=identifier, path=path, replaced=replaced)


def _clean_tags(tags: frozenset[str] | None) -> frozenset[str] | None:
    if tags is None:
        return None
    cleaned = frozenset(tag.strip() for tag in tags if tag.strip())
    return cleaned or None
