"""Work unit definitions for batch board generation."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Optional

from engine.board import Board
from engine.difficulty import Difficulty

STATUS_PENDING = "pending"
STATUS_OK = "ok"
STATUS_FAILED = "failed"
STATUS_CANCELLED = "cancelled"


@dataclass(frozen=True)
class GenerationTask:
    """One independent ``generate`` call."""

    difficulty: Difficulty
    seed: str


@dataclass
class GenerationResult:
    """Outcome of a task.

    ``board`` is set only when ``status`` is ``ok``; a failed task never
    carries a partial board.
    """

    task: GenerationTask
    board: Optional[Board] = None
    status: str = STATUS_PENDING
    attempts: int = 0
    time_ms: int = 0
    error: Optional[str] = None

    def to_event(self) -> dict:
        return {
            "event": "board.generated" if self.status == STATUS_OK else f"board.{self.status}",
            "difficulty": self.task.difficulty.value,
            "seed": self.task.seed,
            "board_id": self.board.id if self.board else None,
            "board_seed": self.board.seed if self.board else None,
            "empty_cells": self.board.empty_cells if self.board else None,
            "status": self.status,
            "attempts": self.attempts,
            "time_ms": self.time_ms,
            "error": self.error,
        }


def retry_seed(seed: str, attempt: int) -> str:
    """Derive the seed for retry ``attempt`` (1-based) of ``seed``."""

    if attempt <= 0:
        return seed
    return uuid.uuid5(uuid.NAMESPACE_URL, f"{seed}|retry|{attempt}").hex


__all__ = [
    "STATUS_CANCELLED",
    "STATUS_FAILED",
    "STATUS_OK",
    "STATUS_PENDING",
    "GenerationResult",
    "GenerationTask",
    "retry_seed",
]
