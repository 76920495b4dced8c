"""On-disk store for pre-generated boards.

The file holds a canonical JSON list of board records; list order is the only
key.  Lookups by id and by difficulty scan the cached list.
"""

from __future__ import annotations

import json
import logging
import os
import random
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from contracts import validator
from contracts.jsoncanon import canonical_dump
from engine.board import Board
from engine.difficulty import Difficulty
from orchestrator.scheduler import DEFAULT_PER_DIFFICULTY, Scheduler, boards_from, standard_tasks
from orchestrator.task import STATUS_OK
from project_config import get_section

_LOGGER = logging.getLogger(__name__)

_REPO_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_STORE_PATH = _REPO_ROOT / "boards" / "PreGeneratedGameBoards.json"
STORE_PATH_ENV_VAR = "BOARDS_STORE_PATH"


def default_store_path(env: Optional[dict] = None) -> Path:
    """Resolve the store path: environment over ``[store] path`` over default."""

    env_map = os.environ if env is None else env
    override = env_map.get(STORE_PATH_ENV_VAR)
    if override:
        return Path(override)
    configured = get_section("store.path", default=None)
    if configured:
        path = Path(configured)
        return path if path.is_absolute() else _REPO_ROOT / path
    return DEFAULT_STORE_PATH


class BoardStore:
    """JSON-file persistence with an in-memory cache."""

    def __init__(
        self,
        path: str | Path | None = None,
        *,
        per_difficulty: Optional[int] = None,
        scheduler: Optional[Scheduler] = None,
    ) -> None:
        self.path = Path(path) if path is not None else default_store_path()
        if per_difficulty is None:
            per_difficulty = int(get_section("store.per_difficulty", default=DEFAULT_PER_DIFFICULTY))
        self.per_difficulty = per_difficulty
        self._scheduler = scheduler
        self._cache: Optional[List[Board]] = None

    def save(self, boards: List[Board]) -> Path:
        """Write ``boards`` canonically and refresh the cache."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_bytes(canonical_dump([board.to_dict() for board in boards]))
        self._cache = list(boards)
        return self.path

    def load(self, progress: Optional[Callable[[float], None]] = None) -> List[Board]:
        """Return all boards, generating the standard set if the file is missing."""

        if self._cache is not None:
            return self._cache
        if not self.path.exists():
            return self.ensure_standard_set(progress=progress)

        raw = json.loads(self.path.read_text("utf-8"))
        if not isinstance(raw, list):
            raise ValueError(f"board store {self.path} must contain a JSON list")
        boards: List[Board] = []
        for record in raw:
            validator.assert_valid(record, profile="fast")
            boards.append(Board.from_dict(record))
        self._cache = boards
        return boards

    def replace_tiers(self, boards: List[Board], tiers: Iterable[Difficulty]) -> Path:
        """Swap in ``boards`` for the given tiers, keeping every other stored tier.

        Tiers are written in difficulty order; a missing store file counts as
        empty rather than triggering the standard set.
        """

        replaced = {Difficulty.parse(tier) for tier in tiers}
        existing = self.load() if self._cache is not None or self.path.exists() else []
        merged: List[Board] = []
        for level in Difficulty:
            source = boards if level in replaced else existing
            merged.extend(board for board in source if board.difficulty is level)
        return self.save(merged)

    def find_board(self, board_id: str) -> Optional[Board]:
        for board in self.load():
            if board.id == board_id:
                return board
        return None

    def boards_for(self, difficulty: Difficulty | str) -> List[Board]:
        level = Difficulty.parse(difficulty)
        return [board for board in self.load() if board.difficulty is level]

    def random_board(self, difficulty: Difficulty | str, rng: Optional[random.Random] = None) -> Optional[Board]:
        candidates = self.boards_for(difficulty)
        if not candidates:
            return None
        return (rng or random).choice(candidates)

    def clear_cache(self) -> None:
        self._cache = None

    def ensure_standard_set(self, progress: Optional[Callable[[float], None]] = None) -> List[Board]:
        """Generate, save and cache the standard set of boards."""

        scheduler = self._scheduler or Scheduler()
        tasks = standard_tasks(self.per_difficulty)
        _LOGGER.info("generating standard board set (%d boards) into %s", len(tasks), self.path)
        if progress is not None:
            progress(0.0)
        results = scheduler.run(tasks, progress=progress)
        if any(r.status != STATUS_OK for r in results):
            failed = [r.task.seed for r in results if r.status != STATUS_OK]
            raise RuntimeError(f"standard board generation incomplete; failed seeds: {failed}")
        boards = boards_from(results)
        self.save(boards)
        return boards


__all__ = ["DEFAULT_STORE_PATH", "STORE_PATH_ENV_VAR", "BoardStore", "default_store_path"]
