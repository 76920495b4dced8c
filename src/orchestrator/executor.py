"""Executor backends that run independent generation tasks."""

from __future__ import annotations

import concurrent.futures
import logging
import threading
import time
from typing import Callable, Dict, List, Optional, Protocol, Sequence

from engine.errors import GenerationFailure
from engine.generator import generate

from .task import (
    STATUS_CANCELLED,
    STATUS_FAILED,
    STATUS_OK,
    GenerationResult,
    GenerationTask,
    retry_seed,
)

_LOGGER = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


def run_task(task: GenerationTask, max_attempts: int = 1) -> GenerationResult:
    """Run ``task``, retrying with derived seeds after a ``GenerationFailure``."""

    result = GenerationResult(task=task)
    start = time.perf_counter()
    for attempt in range(max(1, max_attempts)):
        result.attempts = attempt + 1
        seed = retry_seed(task.seed, attempt)
        try:
            result.board = generate(task.difficulty, seed)
        except GenerationFailure as exc:
            result.error = str(exc)
            _LOGGER.warning("generation failed for seed %r (attempt %d): %s", seed, attempt + 1, exc)
            continue
        result.status = STATUS_OK
        result.error = None
        break
    else:
        result.status = STATUS_FAILED
    result.time_ms = int((time.perf_counter() - start) * 1000)
    return result


class Executor(Protocol):
    """Abstract execution backend."""

    def submit(
        self,
        tasks: Sequence[GenerationTask],
        *,
        progress: Optional[ProgressCallback] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[GenerationResult]:
        """Run ``tasks`` and return their results in task order."""

    def shutdown(self) -> None:
        """Tear down resources allocated by the executor."""


def _cancelled(task: GenerationTask) -> GenerationResult:
    return GenerationResult(task=task, status=STATUS_CANCELLED)


class SequentialExecutor:
    """Deterministic executor processing tasks serially in the caller's thread."""

    def __init__(self, max_attempts: int = 1) -> None:
        self.max_attempts = max_attempts

    def submit(
        self,
        tasks: Sequence[GenerationTask],
        *,
        progress: Optional[ProgressCallback] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[GenerationResult]:
        results: List[GenerationResult] = []
        total = len(tasks)
        for index, task in enumerate(tasks):
            if cancel is not None and cancel.is_set():
                results.extend(_cancelled(t) for t in tasks[index:])
                break
            results.append(run_task(task, self.max_attempts))
            if progress is not None:
                progress((index + 1) / total)
        return results

    def shutdown(self) -> None:
        return None


class PoolExecutor:
    """Process pool backend; each task runs in its own worker call."""

    def __init__(self, max_workers: Optional[int] = None, max_attempts: int = 1) -> None:
        self.max_workers = max_workers
        self.max_attempts = max_attempts
        self._pool: Optional[concurrent.futures.ProcessPoolExecutor] = None

    def _ensure_pool(self) -> concurrent.futures.ProcessPoolExecutor:
        if self._pool is None:
            self._pool = concurrent.futures.ProcessPoolExecutor(max_workers=self.max_workers)
        return self._pool

    def submit(
        self,
        tasks: Sequence[GenerationTask],
        *,
        progress: Optional[ProgressCallback] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[GenerationResult]:
        pool = self._ensure_pool()
        futures: Dict[concurrent.futures.Future, int] = {
            pool.submit(run_task, task, self.max_attempts): index for index, task in enumerate(tasks)
        }
        results: List[Optional[GenerationResult]] = [None] * len(tasks)
        done = 0
        for future in concurrent.futures.as_completed(futures):
            index = futures[future]
            if future.cancelled():
                results[index] = _cancelled(tasks[index])
            else:
                results[index] = future.result()
                done += 1
                if progress is not None:
                    progress(done / len(tasks))
            if cancel is not None and cancel.is_set():
                for pending in futures:
                    pending.cancel()
        return [r if r is not None else _cancelled(tasks[i]) for i, r in enumerate(results)]

    def shutdown(self) -> None:
        if self._pool is not None:
            self._pool.shutdown(wait=True, cancel_futures=True)
            self._pool = None


__all__ = ["Executor", "PoolExecutor", "SequentialExecutor", "run_task"]
