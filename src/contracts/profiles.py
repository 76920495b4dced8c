"""Validation profiles (dev/ci/fast)."""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import Dict, FrozenSet

ALL_RULES: FrozenSet[str] = frozenset(
    {
        "board_id",
        "solution_valid",
        "puzzle_consistent",
        "puzzle_unique",
        "removal_target",
    }
)


@dataclass(frozen=True)
class ProfileConfig:
    """Profile toggles that govern which checks are executed."""

    name: str
    check_schema: bool = True
    check_invariants: bool = True
    warn_as_error: bool = False
    rules: FrozenSet[str] = field(default_factory=lambda: ALL_RULES)

    def is_rule_enabled(self, rule_name: str) -> bool:
        return rule_name in self.rules


_PROFILES: Dict[str, ProfileConfig] = {
    "dev": ProfileConfig(name="dev"),
    "ci": ProfileConfig(name="ci", warn_as_error=True),
    # Loading a store of hundreds of boards must not run a uniqueness search each.
    "fast": ProfileConfig(name="fast", rules=ALL_RULES - {"puzzle_unique"}),
}


def get_profile(name: str | None) -> ProfileConfig:
    """Return the profile matching *name* (defaults to ``dev``)."""

    if not name:
        name = "dev"
    key = name.lower()
    if key not in _PROFILES:
        raise ValueError(f"Unknown validation profile: {name}")
    return _PROFILES[key]


__all__ = ["ALL_RULES", "ProfileConfig", "get_profile"]
