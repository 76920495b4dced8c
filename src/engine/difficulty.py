"""Difficulty tags and the static removal-count table."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping

from project_config import get_section

__all__ = ["Difficulty", "DEFAULT_REMOVALS", "removal_table", "removals_for"]


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"
    EXPERT = "Expert"

    @property
    def index(self) -> int:
        """1-based position, used to build the standard seed numbers."""

        return list(Difficulty).index(self) + 1

    @classmethod
    def parse(cls, value: Any) -> "Difficulty":
        """Accept a member, its value (``"Easy"``) or its name (``"EASY"``)."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if wanted in (member.value.lower(), member.name.lower()):
                    return member
        raise ValueError(f"Unknown difficulty: {value!r}")

    def __str__(self) -> str:
        return self.value


DEFAULT_REMOVALS: Mapping[Difficulty, int] = MappingProxyType(
    {
        Difficulty.EASY: 30,
        Difficulty.MEDIUM: 40,
        Difficulty.HARD: 50,
        Difficulty.EXPERT: 55,
    }
)


def removal_table() -> Mapping[Difficulty, int]:
    """Return the active table: defaults overlaid with ``[difficulty.removals]``."""

    table: Dict[Difficulty, int] = dict(DEFAULT_REMOVALS)
    overrides = get_section("difficulty.removals", default={})
    if isinstance(overrides, dict):
        for key, value in overrides.items():
            member = Difficulty.parse(key)
            count = int(value)
            if not 0 <= count <= 81:
                raise ValueError(f"removal count for {member.value} must be in [0, 81], got {count}")
            table[member] = count
    return MappingProxyType(table)


def removals_for(difficulty: Difficulty | str) -> int:
    return removal_table()[Difficulty.parse(difficulty)]
