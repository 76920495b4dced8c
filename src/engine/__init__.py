"""Seeded Sudoku puzzle engine."""

from __future__ import annotations

from .board import Board, board_id_for_seed
from .completion import complete_grid
from .counter import count_solutions, has_unique_solution
from .difficulty import Difficulty, removal_table, removals_for
from .errors import GenerationFailure
from .generator import fresh_seed, generate
from .reduction import reduce_to_unique
from .sequence import SeedSequence, seed_to_state

__all__ = [
    "Board",
    "Difficulty",
    "GenerationFailure",
    "SeedSequence",
    "board_id_for_seed",
    "complete_grid",
    "count_solutions",
    "fresh_seed",
    "generate",
    "has_unique_solution",
    "reduce_to_unique",
    "removal_table",
    "removals_for",
    "seed_to_state",
]
