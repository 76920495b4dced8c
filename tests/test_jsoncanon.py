from __future__ import annotations

import pytest

from contracts.jsoncanon import canonical_dump, canonical_sha256
from engine.difficulty import Difficulty


def test_key_order_and_whitespace_do_not_matter():
    payload_a = {"b": [1, 2], "a": "x"}
    payload_b = {"a": "x", "b": (1, 2)}
    assert canonical_dump(payload_a) == canonical_dump(payload_b) == b'{"a":"x","b":[1,2]}'
    assert canonical_sha256(payload_a) == canonical_sha256(payload_b)
    assert canonical_sha256(payload_a).startswith("sha256-")


def test_enum_values_are_written_plainly():
    assert canonical_dump({"difficulty": Difficulty.HARD}) == b'{"difficulty":"Hard"}'


def test_rejects_floats_and_unknown_types():
    with pytest.raises(TypeError):
        canonical_dump({"value": 1.5})
    with pytest.raises(TypeError):
        canonical_dump({"value": object()})
