"""Canonical JSON encoding for board records.

Dictionary keys are sorted, insignificant whitespace is dropped and the output
is UTF-8, so two equal board lists always serialise to the same bytes and the
same digest.  Board payloads only hold integers, strings and nested lists, so
floats are rejected rather than normalised.
"""

from __future__ import annotations

import hashlib
import json
from enum import Enum
from typing import Any

__all__ = ["canonical_dump", "canonical_sha256"]


def _canonicalize(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return _canonicalize(obj.value)
    if obj is None or isinstance(obj, (bool, int, str)):
        return obj
    if isinstance(obj, float):
        raise TypeError("floats are not permitted in board payloads")
    if isinstance(obj, (list, tuple)):
        return [_canonicalize(item) for item in obj]
    if isinstance(obj, dict):
        return {str(key): _canonicalize(obj[key]) for key in sorted(obj.keys(), key=str)}
    raise TypeError(f"Unsupported type for canonical JSON: {type(obj)!r}")


def canonical_dump(obj: Any) -> bytes:
    """Return canonical JSON bytes for ``obj``."""

    dumped = json.dumps(
        _canonicalize(obj),
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )
    return dumped.encode("utf-8")


def canonical_sha256(obj: Any) -> str:
    """Return ``sha256-<hex>`` over the canonical representation of ``obj``."""

    return f"sha256-{hashlib.sha256(canonical_dump(obj)).hexdigest()}"
