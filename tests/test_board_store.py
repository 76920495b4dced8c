from __future__ import annotations

import json
import random

import pytest

from artifacts.board_store import STORE_PATH_ENV_VAR, BoardStore, default_store_path
from contracts.errors import ManagedValidationError
from engine.difficulty import Difficulty
from engine.generator import generate
from orchestrator.scheduler import standard_seed


@pytest.fixture
def store(tmp_path) -> BoardStore:
    return BoardStore(tmp_path / "boards" / "store.json", per_difficulty=1)


def test_missing_file_generates_standard_set(store) -> None:
    seen = []
    boards = store.load(progress=seen.append)
    assert store.path.exists()
    assert [b.difficulty for b in boards] == list(Difficulty)
    assert [b.seed for b in boards] == [standard_seed(d, 0) for d in Difficulty]
    assert seen[0] == 0.0 and seen[-1] == 1.0


def test_reload_from_disk_matches(store) -> None:
    boards = store.load()
    fresh = BoardStore(store.path)
    assert fresh.load() == boards
    raw = json.loads(store.path.read_text("utf-8"))
    assert raw[0]["difficulty"] == "Easy"


def test_save_is_canonical(store, tmp_path) -> None:
    boards = [generate(Difficulty.EASY, "store-a"), generate(Difficulty.HARD, "store-b")]
    store.save(boards)
    first = store.path.read_bytes()
    other = BoardStore(tmp_path / "copy.json")
    other.save(list(boards))
    assert other.path.read_bytes() == first
    assert b" " not in first


def test_lookups(store) -> None:
    easy = generate(Difficulty.EASY, "lookup-1")
    hard = generate(Difficulty.HARD, "lookup-2")
    store.save([easy, hard])
    store.clear_cache()
    assert store.find_board(hard.id) == hard
    assert store.find_board("not-an-id") is None
    assert store.boards_for("Easy") == [easy]
    assert store.boards_for(Difficulty.EXPERT) == []
    assert store.random_board(Difficulty.HARD, random.Random(1)) == hard
    assert store.random_board(Difficulty.EXPERT) is None


def test_corrupt_store_is_rejected(store) -> None:
    store.path.parent.mkdir(parents=True)
    store.path.write_text('{"boards": []}', encoding="utf-8")
    with pytest.raises(ValueError):
        store.load()


def test_invalid_record_is_rejected(store) -> None:
    record = generate(Difficulty.EASY, "broken").to_dict()
    record["solution"][0][0] = record["solution"][0][1]
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps([record]), encoding="utf-8")
    with pytest.raises(ManagedValidationError):
        store.load()


def test_store_path_precedence(tmp_path, write_config) -> None:
    assert default_store_path({STORE_PATH_ENV_VAR: str(tmp_path / "env.json")}) == tmp_path / "env.json"
    write_config(f'[store]\npath = "{(tmp_path / "cfg.json").as_posix()}"\n')
    assert default_store_path({}) == tmp_path / "cfg.json"


def test_float_cell_in_store_is_a_validation_error(store) -> None:
    record = generate(Difficulty.EASY, "float-cell").to_dict()
    record["solution"][4][4] = float(record["solution"][4][4])
    store.path.parent.mkdir(parents=True)
    store.path.write_text(json.dumps([record]), encoding="utf-8")
    with pytest.raises(ManagedValidationError):
        store.load()


def test_replace_tiers_keeps_untouched_tiers(store) -> None:
    easy = generate(Difficulty.EASY, "tier-easy")
    hard = generate(Difficulty.HARD, "tier-hard")
    store.save([hard, easy])

    new_hard = generate(Difficulty.HARD, "tier-hard-2")
    store.replace_tiers([new_hard], [Difficulty.HARD])
    store.clear_cache()
    assert store.load() == [easy, new_hard]


def test_replace_tiers_on_missing_file_writes_only_new_boards(store) -> None:
    board = generate(Difficulty.MEDIUM, "tier-medium")
    store.replace_tiers([board], ["Medium"])
    assert BoardStore(store.path).load() == [board]
