"""Batch generation: tasks, executors and the scheduler."""

from .executor import Executor, PoolExecutor, SequentialExecutor, run_task
from .scheduler import Scheduler, boards_from, standard_tasks
from .task import GenerationResult, GenerationTask
from . import log

__all__ = [
    "Executor",
    "GenerationResult",
    "GenerationTask",
    "PoolExecutor",
    "Scheduler",
    "SequentialExecutor",
    "boards_from",
    "log",
    "run_task",
    "standard_tasks",
]
