from __future__ import annotations

import hashlib

import pytest

from engine.board import Board, board_id_for_seed
from engine.difficulty import Difficulty
from engine.grid import freeze
from sample_grids import solved_grid, two_solution_grid


def test_board_id_is_eight_digits_of_the_seed_hash() -> None:
    state = int.from_bytes(hashlib.sha256(b"1000").digest()[:8], "big")
    assert board_id_for_seed("1000") == f"{state % 10 ** 8:08d}"
    assert len(board_id_for_seed("x")) == 8
    assert board_id_for_seed("x").isdigit()


def _board() -> Board:
    return Board(
        id=board_id_for_seed("manual"),
        puzzle=freeze(two_solution_grid()),
        solution=freeze(solved_grid()),
        difficulty=Difficulty.EASY,
        seed="manual",
    )


def test_to_dict_uses_plain_values() -> None:
    payload = _board().to_dict()
    assert set(payload) == {"id", "puzzle", "solution", "difficulty", "seed"}
    assert payload["difficulty"] == "Easy"
    assert payload["puzzle"][0][:3] == [0, 0, 3]
    assert isinstance(payload["solution"][0], list)


def test_from_dict_restores_board() -> None:
    board = _board()
    assert Board.from_dict(board.to_dict()) == board
    assert board.empty_cells == 4


def test_from_dict_checks_grid_shape() -> None:
    payload = _board().to_dict()
    payload["puzzle"] = payload["puzzle"][:8]
    with pytest.raises(ValueError):
        Board.from_dict(payload)


def test_board_is_immutable() -> None:
    board = _board()
    with pytest.raises(AttributeError):
        board.seed = "other"  # type: ignore[misc]
