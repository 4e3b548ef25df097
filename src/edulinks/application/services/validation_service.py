from __future__ import annotations

import logging

from edulinks.core.errors import StoreError
from edulinks.domain.models.record import Record
from edulinks.domain.models.validation import (
    RecordOutcome,
    ValidationIssue,
    ValidationReport,
    ValidationResult,
)
from edulinks.infrastructure.store.record_codec import RecordCodecError
from edulinks.infrastructure.store.record_store import RecordStore

logger = logging.getLogger(__name__)


def validate_record(record: Record, *, strict_description: bool = False) -> ValidationResult:
    """Check every field rule and report all problems at once."""
    issues: list[ValidationIssue] = []

    if not record.title.strip():
        issues.append(ValidationIssue(field="title", level="error", message="title is empty"))
    if not record.url.strip():
        issues.append(ValidationIssue(field="url", level="error", message="url is empty"))
    if not record.description.strip():
        issues.append(
            ValidationIssue(
                field="description",
                level="error" if strict_description else "warning",
                message="description is empty",
            )
        )

    return ValidationResult(issues=issues)


class ValidationService:
    def __init__(self, store: RecordStore, *, strict_description: bool = False) -> None:
        self.store = store
        self.strict_description = strict_description

    def validate_all(self) -> ValidationReport:
        outcomes: list[RecordOutcome] = []

        for index, path in enumerate(self.store.list_paths(), start=1):
            identifier = self.store.identifier_for_path(path)
            logger.info("File %d: validating %s", index, path)
            try:
                record = self.store.read(path)
            except (RecordCodecError, StoreError) as exc:
                result = ValidationResult(
                    issues=[ValidationIssue(field="file", level="error", message=str(exc))]
                )
            else:
                result = validate_record(record, strict_description=self.strict_description)

            for message in result.warnings:
                logger.warning("%s: %s", identifier, message)
            outcomes.append(RecordOutcome(identifier=identifier, path=path, result=result))

        return ValidationReport(outcomes=outcomes)
