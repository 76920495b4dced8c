"""Board record contracts.

``validate``/``assert_valid`` check a serialised board against the JSON schema
and the board invariants; ``canonical_dump`` produces the byte form written to
the board store.
"""

from __future__ import annotations

from .errors import ManagedValidationError, ValidationIssue, ValidationReport
from .jsoncanon import canonical_dump, canonical_sha256
from .profiles import ProfileConfig, get_profile
from .validator import assert_valid, validate

__all__ = [
    "ManagedValidationError",
    "ProfileConfig",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid",
    "canonical_dump",
    "canonical_sha256",
    "get_profile",
    "validate",
]
