"""Top-level puzzle generation: seed -> solution -> unique puzzle."""

from __future__ import annotations

import logging
import time
import uuid
from typing import Optional

from .board import Board, board_id_for_seed
from .completion import complete_grid
from .difficulty import Difficulty, removals_for
from .errors import GenerationFailure
from .grid import count_empty, freeze
from .reduction import reduce_to_unique
from .sequence import SeedSequence

__all__ = ["fresh_seed", "generate"]

_LOGGER = logging.getLogger(__name__)


def fresh_seed() -> str:
    """Draw a new seed from process entropy."""

    return str(uuid.uuid4())


def generate(difficulty: Difficulty | str, seed: Optional[str] = None) -> Board:
    """Generate a board for ``difficulty``.

    With a seed the result is fully reproducible: the same ``(difficulty,
    seed)`` pair always yields the same puzzle, solution and id.  Without one a
    fresh seed is drawn first and recorded on the board.  The solution depends
    only on the seed, because completion consumes the sequence before the
    difficulty-specific reduction starts.

    Raises :class:`GenerationFailure` when the solution grid cannot be built.
    """

    level = Difficulty.parse(difficulty)
    if seed is None:
        seed = fresh_seed()
    elif not isinstance(seed, str):
        raise TypeError("seed must be a string")

    t0 = time.perf_counter()
    sequence = SeedSequence.from_seed(seed)
    try:
        solution = complete_grid(sequence)
    except GenerationFailure as exc:
        raise GenerationFailure(str(exc), seed=seed) from exc

    target = removals_for(level)
    puzzle = reduce_to_unique(solution, target, sequence)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    empty = count_empty(puzzle)
    _LOGGER.debug(
        "generated %s board seed=%r empty=%d/%d in %.1f ms",
        level.value,
        seed,
        empty,
        target,
        elapsed_ms,
    )
    return Board(
        id=board_id_for_seed(seed),
        puzzle=freeze(puzzle),
        solution=freeze(solution),
        difficulty=level,
        seed=seed,
    )
