from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class ValidationIssue:
    field: str
    level: str
    message: str


@dataclass(slots=True)
class ValidationResult:
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(issue.level == "error" for issue in self.issues)

    @property
    def violations(self) -> list[str]:
        return [issue.message for issue in self.issues if issue.level == "error"]

    @property
    def warnings(self) -> list[str]:
        return [issue.message for issue in self.issues if issue.level == "warning"]


@dataclass(slots=True)
class RecordOutcome:
    identifier: str
    path: Path
    result: ValidationResult


@dataclass(slots=True)
class ValidationReport:
    outcomes: list[RecordOutcome]

    @property
    def ok(self) -> bool:
        return all(outcome.result.is_valid for outcome in self.outcomes)

    @property
    def invalid(self) -> list[RecordOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.result.is_valid]
