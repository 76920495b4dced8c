from __future__ import annotations

import threading

import pytest

from engine.difficulty import Difficulty
from engine.errors import GenerationFailure
from engine.generator import generate
from orchestrator import executor as executor_mod
from orchestrator import log as event_log
from orchestrator.executor import PoolExecutor, SequentialExecutor, run_task
from orchestrator.scheduler import Scheduler, boards_from, standard_seed, standard_tasks
from orchestrator.task import (
    STATUS_CANCELLED,
    STATUS_FAILED,
    STATUS_OK,
    GenerationTask,
    retry_seed,
)


def test_standard_seeds() -> None:
    assert standard_seed(Difficulty.EASY, 0) == "1000"
    assert standard_seed(Difficulty.EXPERT, 9) == "4009"
    with pytest.raises(ValueError):
        standard_seed(Difficulty.EASY, 1000)

    tasks = standard_tasks(2, [Difficulty.HARD, Difficulty.EASY])
    assert [(t.difficulty, t.seed) for t in tasks] == [
        (Difficulty.HARD, "3000"),
        (Difficulty.HARD, "3001"),
        (Difficulty.EASY, "1000"),
        (Difficulty.EASY, "1001"),
    ]
    assert len(standard_tasks(1)) == 4


def test_retry_seed_is_deterministic() -> None:
    assert retry_seed("s", 0) == "s"
    assert retry_seed("s", 1) == retry_seed("s", 1)
    assert retry_seed("s", 1) != retry_seed("s", 2)
    assert len(retry_seed("s", 1)) == 32


def test_run_task_retries_with_derived_seed(monkeypatch) -> None:
    calls = []

    def flaky(difficulty, seed):
        calls.append(seed)
        if len(calls) < 3:
            raise GenerationFailure("exhausted", seed=seed)
        return generate(difficulty, seed)

    monkeypatch.setattr(executor_mod, "generate", flaky)
    result = run_task(GenerationTask(Difficulty.EASY, "retry-me"), max_attempts=3)
    assert result.status == STATUS_OK
    assert result.attempts == 3
    assert calls == ["retry-me", retry_seed("retry-me", 1), retry_seed("retry-me", 2)]
    assert result.board.seed == calls[-1]
    assert result.error is None


def test_run_task_gives_up(monkeypatch) -> None:
    def broken(difficulty, seed):
        raise GenerationFailure("exhausted", seed=seed)

    monkeypatch.setattr(executor_mod, "generate", broken)
    result = run_task(GenerationTask(Difficulty.EASY, "never"), max_attempts=2)
    assert result.status == STATUS_FAILED
    assert result.board is None
    assert result.attempts == 2
    assert "exhausted" in result.error
    assert result.to_event()["event"] == "board.failed"


def test_sequential_run_reports_progress_in_order() -> None:
    seen = []
    tasks = standard_tasks(1, [Difficulty.EASY, Difficulty.MEDIUM])
    results = Scheduler(SequentialExecutor()).run(tasks, progress=seen.append)
    assert seen == [0.5, 1.0]
    assert [r.task for r in results] == tasks
    boards = boards_from(results)
    assert [b.seed for b in boards] == ["1000", "2000"]


def test_empty_batch() -> None:
    seen = []
    assert Scheduler(SequentialExecutor()).run([], progress=seen.append) == []
    assert seen == [1.0]


def test_cancel_stops_between_tasks(monkeypatch) -> None:
    cancel = threading.Event()

    def generate_then_cancel(difficulty, seed):
        cancel.set()
        return generate(difficulty, seed)

    monkeypatch.setattr(executor_mod, "generate", generate_then_cancel)
    tasks = standard_tasks(3, [Difficulty.EASY])
    results = Scheduler(SequentialExecutor()).run(tasks, cancel=cancel)
    assert [r.status for r in results] == [STATUS_OK, STATUS_CANCELLED, STATUS_CANCELLED]
    assert len(boards_from(results)) == 1


def test_event_log_records_each_result(tmp_path) -> None:
    event_log.configure(tmp_path / "events")
    try:
        tasks = standard_tasks(1, [Difficulty.EASY])
        Scheduler(SequentialExecutor(), log_events=True).run(tasks)
        path = event_log.current_log_path()
        assert path is not None and path.name == "generation_00.jsonl"
        events = list(event_log.read_events(path))
        assert len(events) == 1
        assert events[0]["event"] == "board.generated"
        assert events[0]["seed"] == "1000"
        assert events[0]["empty_cells"] == 30
        assert "ts" in events[0]
    finally:
        event_log.configure("logs/generation")


def test_event_log_rotates(tmp_path) -> None:
    event_log.configure(tmp_path, max_bytes=10)
    try:
        first = event_log.append_event({"event": "a"})
        second = event_log.append_event({"event": "b"})
        assert first != second
        assert second.name == "generation_01.jsonl"
    finally:
        event_log.configure("logs/generation")


def test_pool_matches_sequential() -> None:
    tasks = standard_tasks(1, [Difficulty.EASY, Difficulty.MEDIUM])
    pool = Scheduler(PoolExecutor(max_workers=2))
    try:
        pooled = pool.run(tasks)
    finally:
        pool.shutdown()
    serial = Scheduler(SequentialExecutor()).run(tasks)
    assert [r.status for r in pooled] == [STATUS_OK, STATUS_OK]
    assert boards_from(pooled) == boards_from(serial)
