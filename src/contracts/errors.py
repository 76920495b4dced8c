"""Issue and report types produced by board record validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

SEVERITY_ERROR = "ERROR"
SEVERITY_WARN = "WARN"


@dataclass(frozen=True)
class ValidationIssue:
    """One finding; ``path`` is a JSONPath-like pointer such as ``$.puzzle[1][4]``."""

    code: str
    msg: str
    path: str
    severity: str = SEVERITY_ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity == SEVERITY_WARN

    def describe(self) -> str:
        return f"{self.severity} {self.code} {self.path}: {self.msg}"


@dataclass(frozen=True)
class ValidationReport:
    ok: bool
    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)
    timings_ms: Dict[str, int] = field(default_factory=dict)

    @property
    def issues(self) -> List[ValidationIssue]:
        return self.errors + self.warnings

    def blocking(self, warn_as_error: bool = False) -> List[ValidationIssue]:
        """Issues that make the record unacceptable under the given strictness."""

        return self.issues if warn_as_error else list(self.errors)


class ManagedValidationError(ValueError):
    """A record failed validation; ``report`` holds every finding."""

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    return ValidationIssue(code, msg, path, SEVERITY_ERROR)


def make_warning(code: str, msg: str, path: str) -> ValidationIssue:
    return ValidationIssue(code, msg, path, SEVERITY_WARN)


__all__ = [
    "SEVERITY_ERROR",
    "SEVERITY_WARN",
    "ManagedValidationError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "make_warning",
]
