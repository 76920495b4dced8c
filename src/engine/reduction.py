# reduction.py
# Remove cells from a complete grid while keeping exactly one completion.

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from .counter import count_solutions
from .grid import SIZE, Grid, check_shape, grid_copy, is_complete_solution
from .sequence import SeedSequence

__all__ = ["reduce_to_unique", "removal_order"]

_LOGGER = logging.getLogger(__name__)


def removal_order(sequence: SeedSequence) -> List[Tuple[int, int]]:
    """All 81 positions in row-major order, shuffled by ``sequence``."""

    cells = [(r, c) for r in range(SIZE) for c in range(SIZE)]
    sequence.shuffle(cells)
    return cells


def reduce_to_unique(
    solution: Sequence[Sequence[int]],
    removals: int,
    sequence: SeedSequence,
) -> Grid:
    """Return a puzzle derived from ``solution`` with up to ``removals`` empty cells.

    Positions are visited in a seeded order; a removal is kept only when the
    puzzle still has exactly one completion.  Reaching fewer than ``removals``
    empty cells is an accepted outcome, not an error.
    """

    if removals < 0:
        raise ValueError("removals must be non-negative")
    check_shape(solution)
    if not is_complete_solution(solution):
        raise ValueError("solution must be a complete valid grid")

    puzzle = grid_copy(solution)
    removed = 0
    for r, c in removal_order(sequence):
        if removed >= removals:
            break
        saved = puzzle[r][c]
        puzzle[r][c] = 0
        if count_solutions(puzzle, cap=2) == 1:
            removed += 1
        else:
            puzzle[r][c] = saved

    if removed < removals:
        _LOGGER.debug("uniqueness stopped reduction at %d of %d removals", removed, removals)
    return puzzle
