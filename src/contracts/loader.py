"""Schema loading utilities for board validation."""

from __future__ import annotations

import copy
import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema

_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"

BOARD_SCHEMA = "board.schema.json"


def load_schema(schema_path: str = BOARD_SCHEMA) -> Dict[str, Any]:
    """Load a JSON schema shipped with the package."""

    if "://" in schema_path:
        raise ValueError("Remote schema paths are not permitted")

    resolved = (_SCHEMA_ROOT / schema_path).resolve()
    if not str(resolved).startswith(str(_SCHEMA_ROOT)):
        raise ValueError("Schema path escapes the schemas directory")
    return copy.deepcopy(_read_schema(str(resolved)))


@lru_cache(maxsize=None)
def _read_schema(path: str) -> Dict[str, Any]:
    return json.loads(Path(path).read_text("utf-8"))


@lru_cache(maxsize=None)
def compiled_validator(schema_path: str = BOARD_SCHEMA) -> jsonschema.Draft202012Validator:
    """Return a cached Draft 2020-12 validator for ``schema_path``."""

    schema = load_schema(schema_path)
    jsonschema.Draft202012Validator.check_schema(schema)
    return jsonschema.Draft202012Validator(schema)


__all__ = ["BOARD_SCHEMA", "compiled_validator", "load_schema"]
