"""Backtracking fill of a grid in row-major order with seeded candidate order."""

from __future__ import annotations

from typing import Optional, Sequence

from .errors import GenerationFailure
from .grid import DIGITS, SIZE, Grid, check_shape, empty_grid, grid_copy, is_valid_placement
from .sequence import SeedSequence

__all__ = ["complete_grid", "fill_grid"]


def _next_empty(grid: Grid, start: int) -> int:
    for index in range(start, SIZE * SIZE):
        if grid[index // SIZE][index % SIZE] == 0:
            return index
    return -1


def fill_grid(grid: Grid, sequence: SeedSequence, start: int = 0) -> bool:
    """Fill every empty cell of ``grid`` from position ``start`` onwards.

    Returns ``True`` when the grid is complete.  On ``False`` every cell this
    call wrote has been reset to 0, so the grid is exactly as it was passed in.
    """

    index = _next_empty(grid, start)
    if index < 0:
        return True
    r, c = divmod(index, SIZE)

    candidates = list(DIGITS)
    sequence.shuffle(candidates)
    for d in candidates:
        if not is_valid_placement(grid, r, c, d):
            continue
        grid[r][c] = d
        if fill_grid(grid, sequence, index + 1):
            return True
        grid[r][c] = 0
    return False


def complete_grid(sequence: SeedSequence, start: Optional[Sequence[Sequence[int]]] = None) -> Grid:
    """Return a complete solution grid, starting from ``start`` if given.

    ``start`` is copied, never mutated.  Raises :class:`GenerationFailure` when
    no completion exists.
    """

    if start is None:
        grid = empty_grid()
    else:
        check_shape(start)
        grid = grid_copy(start)
        for r in range(SIZE):
            for c in range(SIZE):
                v = grid[r][c]
                if v and not is_valid_placement(grid, r, c, v):
                    raise GenerationFailure(f"given {v} at ({r}, {c}) conflicts with another given")

    if not fill_grid(grid, sequence):
        raise GenerationFailure("grid completion exhausted all candidates")
    return grid
