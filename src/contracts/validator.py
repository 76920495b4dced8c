"""Public facade for board record validation."""

from __future__ import annotations

import os
import time
from typing import Any, Dict, List

import jsonschema

from . import loader, profiles, rulebook
from .errors import (
    ManagedValidationError,
    ValidationIssue,
    ValidationReport,
    make_error,
)
from .profiles import ProfileConfig

PROFILE_ENV_VAR = "BOARDS_VALIDATION_PROFILE"


def _choose_profile(profile: str | ProfileConfig | None) -> ProfileConfig:
    if isinstance(profile, ProfileConfig):
        return profile
    if profile in (None, "", "auto"):
        return profiles.get_profile(os.environ.get(PROFILE_ENV_VAR))
    return profiles.get_profile(str(profile))


def _jsonschema_path(exc: jsonschema.ValidationError) -> str:
    path = exc.absolute_path
    if not path:
        return "$"
    components: List[str] = ["$"]
    for part in path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def _cell_types(record: Dict[str, Any]) -> List[ValidationIssue]:
    """Flag grid cells that are not plain ints.

    JSON Schema counts ``5.0`` as an integer, the engine does not.
    """

    issues: List[ValidationIssue] = []
    for key in ("puzzle", "solution"):
        grid = record.get(key)
        if not isinstance(grid, list):
            continue
        for r, row in enumerate(grid):
            if not isinstance(row, list):
                continue
            for c, value in enumerate(row):
                if type(value) is not int:
                    issues.append(
                        make_error("type.mismatch", f"cell must be an integer, got {value!r}", f"$.{key}[{r}][{c}]")
                    )
    return issues


def _schema_stage(record: Any, profile: ProfileConfig) -> List[ValidationIssue]:
    if not isinstance(record, dict):
        return [make_error("type.mismatch", "Board record must be a JSON object", "$")]
    issues = _cell_types(record)
    if not profile.check_schema:
        return issues
    validator = loader.compiled_validator()
    for exc in sorted(validator.iter_errors(record), key=lambda e: list(e.absolute_path)):
        issues.append(make_error("schema.violation", exc.message, _jsonschema_path(exc)))
    return issues


def _split(issues: List[ValidationIssue]) -> tuple[List[ValidationIssue], List[ValidationIssue]]:
    errors = [issue for issue in issues if not issue.is_warning]
    warnings = [issue for issue in issues if issue.is_warning]
    return errors, warnings


def validate(record: Dict[str, Any], profile: str | ProfileConfig | None = None) -> ValidationReport:
    """Validate a serialised board record.

    Invariants only run when the schema stage is clean; they assume the shape
    the schema guarantees.
    """

    profile_cfg = _choose_profile(profile)
    timings = {"schema": 0, "invariants": 0}

    schema_start = time.perf_counter()
    all_errors, all_warnings = _split(_schema_stage(record, profile_cfg))
    timings["schema"] = int((time.perf_counter() - schema_start) * 1000)

    if profile_cfg.check_invariants and not all_errors:
        invariants_start = time.perf_counter()
        inv_errors, inv_warnings = _split(rulebook.run_invariants(record, profile_cfg))
        all_errors.extend(inv_errors)
        all_warnings.extend(inv_warnings)
        timings["invariants"] = int((time.perf_counter() - invariants_start) * 1000)

    return ValidationReport(ok=not all_errors, errors=all_errors, warnings=all_warnings, timings_ms=timings)


def assert_valid(record: Dict[str, Any], profile: str | ProfileConfig | None = None) -> None:
    profile_cfg = _choose_profile(profile)
    report = validate(record, profile=profile_cfg)
    issues = report.blocking(profile_cfg.warn_as_error)
    if not issues:
        return
    codes = ", ".join(issue.code for issue in issues[:5])
    if len(issues) > 5:
        codes += ", …"
    board_id = record.get("id") if isinstance(record, dict) else None
    raise ManagedValidationError(f"Validation failed for board {board_id!r}: {codes}", report)


__all__ = [
    "PROFILE_ENV_VAR",
    "ManagedValidationError",
    "assert_valid",
    "validate",
]
