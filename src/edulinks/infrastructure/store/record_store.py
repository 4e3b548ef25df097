from __future__ import annotations

import logging
from pathlib import Path

from edulinks.core.errors import StoreError
from edulinks.core.files import ensure_directory, write_text_atomic
from edulinks.core.identifiers import record_identifier
from edulinks.domain.models.record import Record
from edulinks.infrastructure.store.record_codec import decode_record, encode_record

logger = logging.getLogger(__name__)

RECORD_SUFFIX = ".toml"


class RecordStore:
    """A flat directory holding one ``<identifier>.toml`` file per record."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = base_dir

    def ensure_layout(self) -> bool:
        try:
            created = ensure_directory(self.base_dir)
        except OSError as exc:
            raise StoreError(f"Unable to create record directory {self.base_dir}: {exc}") from exc
        if created:
            logger.info("Created record directory at %s", self.base_dir)
        else:
            logger.info("Found existing record directory at %s", self.base_dir)
        return created

    def path_for_identifier(self, identifier: str) -> Path:
        return self.base_dir / f"{identifier}{RECORD_SUFFIX}"

    def path_for(self, record: Record) -> Path:
        return self.path_for_identifier(record_identifier(record.title))

    @staticmethod
    def identifier_for_path(path: Path) -> str:
        return path.name[: -len(RECORD_SUFFIX)] if path.name.endswith(RECORD_SUFFIX) else path.name

    def exists(self, record: Record) -> bool:
        return self.path_for(record).exists()

    def write(self, record: Record) -> Path:
        path = self.path_for(record)
        try:
            write_text_atomic(path, encode_record(record))
        except (OSError, UnicodeError) as exc:
            raise StoreError(f"Unable to write record {path}: {exc}") from exc
        logger.debug("Wrote %s", path)
        return path

    def read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StoreError(f"Unable to read record {path}: {exc}") from exc

    def read(self, path: Path) -> Record:
        """Decode one record file; raises ``RecordCodecError`` for bad content."""
        return decode_record(self.read_text(path))

    def remove(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as exc:
            raise StoreError(f"Unable to remove record {path}: {exc}") from exc

    def list_paths(self) -> list[Path]:
        if not self.base_dir.is_dir():
            return []
        try:
            return sorted(
                path
                for path in self.base_dir.iterdir()
                if path.is_file() and path.suffix == RECORD_SUFFIX and not path.name.startswith(".")
            )
        except OSError as exc:
            raise StoreError(f"Unable to list record directory {self.base_dir}: {exc}") from exc
