"""Immutable board record handed to persistence and presentation layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from .difficulty import Difficulty
from .grid import FrozenGrid, check_shape, count_empty, freeze, thaw
from .sequence import seed_to_state

__all__ = ["ID_MODULUS", "Board", "board_id_for_seed"]

ID_MODULUS = 10 ** 8


def board_id_for_seed(seed: str) -> str:
    """Short shareable identifier: seed hash modulo 10**8 as 8 digits."""

    return f"{seed_to_state(seed) % ID_MODULUS:08d}"


@dataclass(frozen=True)
class Board:
    """A puzzle together with its unique solution."""

    id: str
    puzzle: FrozenGrid
    solution: FrozenGrid
    difficulty: Difficulty
    seed: str

    @property
    def empty_cells(self) -> int:
        return count_empty(self.puzzle)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "puzzle": thaw(self.puzzle),
            "solution": thaw(self.solution),
            "difficulty": self.difficulty.value,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Board":
        puzzle = payload["puzzle"]
        solution = payload["solution"]
        check_shape(puzzle)
        check_shape(solution)
        return cls(
            id=str(payload["id"]),
            puzzle=freeze(puzzle),
            solution=freeze(solution),
            difficulty=Difficulty.parse(payload["difficulty"]),
            seed=str(payload["seed"]),
        )
