from __future__ import annotations

from dataclasses import dataclass
from functools import partial

from rich.console import Console

from edulinks.application.services.link_service import Describer, LinkService
from edulinks.application.services.validation_service import ValidationService
from edulinks.core.config import AppConfig
from edulinks.infrastructure.store.record_store import RecordStore
from edulinks.infrastructure.web.meta_description import fetch_meta_description


@dataclass(slots=True)
class CLIContext:
    config: AppConfig
    console: Console

    def store(self) -> RecordStore:
        return RecordStore(self.config.records_dir)

    def link_service(self) -> LinkService:
        describe: Describer | None = None
        if self.config.fetch_descriptions:
            describe = partial(fetch_meta_description, timeout=self.config.fetch_timeout)
        return LinkService(self.store(), describe=describe)

    def validation_service(self) -> ValidationService:
        return ValidationService(self.store(), strict_description=self.config.strict_description)
