"""Error types raised by the puzzle engine."""

from __future__ import annotations


class GenerationFailure(RuntimeError):
    """Grid completion exhausted every candidate without filling the grid.

    Unreachable from an empty grid with a correct search, but reported rather
    than assumed away.  Callers may retry with a different seed.
    """

    def __init__(self, message: str, *, seed: str | None = None) -> None:
        self.seed = seed
        super().__init__(message if seed is None else f"{message} (seed={seed!r})")


__all__ = ["GenerationFailure"]
