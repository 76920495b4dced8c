from __future__ import annotations

import pytest

from engine.completion import complete_grid, fill_grid
from engine.errors import GenerationFailure
from engine.grid import grid_copy, is_complete_solution
from engine.sequence import SeedSequence
from sample_grids import conflicting_grid, dead_end_grid, two_solution_grid


def test_fills_an_empty_grid():
    grid = complete_grid(SeedSequence.from_seed("fill"))
    assert is_complete_solution(grid)


def test_same_sequence_state_same_grid():
    a = complete_grid(SeedSequence.from_seed("fill"))
    b = complete_grid(SeedSequence.from_seed("fill"))
    c = complete_grid(SeedSequence.from_seed("fill-2"))
    assert a == b
    assert a != c


def test_partial_start_keeps_givens_and_is_not_mutated():
    start = two_solution_grid()
    before = grid_copy(start)
    grid = complete_grid(SeedSequence(7), start)
    assert start == before
    assert is_complete_solution(grid)
    for r in range(9):
        for c in range(9):
            if start[r][c]:
                assert grid[r][c] == start[r][c]


def test_conflicting_givens_raise():
    with pytest.raises(GenerationFailure):
        complete_grid(SeedSequence(1), conflicting_grid())


def test_dead_end_raises_and_leaves_start_untouched():
    start = dead_end_grid()
    before = grid_copy(start)
    with pytest.raises(GenerationFailure):
        complete_grid(SeedSequence(1), start)
    assert start == before


def test_fill_grid_undoes_its_writes_on_failure():
    grid = dead_end_grid()
    before = grid_copy(grid)
    assert fill_grid(grid, SeedSequence(3)) is False
    assert grid == before
