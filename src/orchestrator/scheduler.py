"""Batch scheduler: builds task lists and runs them on an executor."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Sequence

from engine.board import Board
from engine.difficulty import Difficulty
from project_config import get_section

from . import log as event_log
from .executor import Executor, ProgressCallback, SequentialExecutor
from .task import STATUS_FAILED, STATUS_OK, GenerationResult, GenerationTask

_LOGGER = logging.getLogger(__name__)

DEFAULT_PER_DIFFICULTY = 10
DEFAULT_MAX_ATTEMPTS = 3


def standard_seed(difficulty: Difficulty, index: int) -> str:
    """Seed of the ``index``-th standard board: ``<difficulty index><3 digits>``."""

    if not 0 <= index < 1000:
        raise ValueError("standard board index must be in [0, 1000)")
    return str(difficulty.index * 1000 + index)


def standard_tasks(
    per_difficulty: int = DEFAULT_PER_DIFFICULTY,
    difficulties: Optional[Iterable[Difficulty]] = None,
) -> List[GenerationTask]:
    """Deterministic task list so every installation builds the same boards."""

    levels = list(difficulties) if difficulties is not None else list(Difficulty)
    return [
        GenerationTask(difficulty=level, seed=standard_seed(level, i))
        for level in levels
        for i in range(per_difficulty)
    ]


def configured_max_attempts() -> int:
    return int(get_section("batch.max_attempts", default=DEFAULT_MAX_ATTEMPTS))


class Scheduler:
    """Runs generation batches with cooperative cancellation between tasks."""

    def __init__(self, executor: Executor | None = None, *, log_events: bool = False) -> None:
        self.executor = executor or SequentialExecutor(max_attempts=configured_max_attempts())
        self.log_events = log_events

    def run(
        self,
        tasks: Sequence[GenerationTask],
        progress: Optional[ProgressCallback] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[GenerationResult]:
        """Run ``tasks`` and return results in task order."""

        if not tasks:
            if progress is not None:
                progress(1.0)
            return []
        _LOGGER.info("generating %d boards", len(tasks))
        results = self.executor.submit(list(tasks), progress=progress, cancel=cancel)

        failed = sum(1 for r in results if r.status == STATUS_FAILED)
        if failed:
            _LOGGER.warning("%d of %d boards failed to generate", failed, len(results))
        if self.log_events:
            for result in results:
                event_log.append_event(result.to_event())
        return results

    def shutdown(self) -> None:
        self.executor.shutdown()


def boards_from(results: Iterable[GenerationResult]) -> List[Board]:
    """Boards of the successful results, in order."""

    return [r.board for r in results if r.status == STATUS_OK and r.board is not None]


__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_PER_DIFFICULTY",
    "Scheduler",
    "boards_from",
    "configured_max_attempts",
    "standard_seed",
    "standard_tasks",
]
