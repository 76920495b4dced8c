"""Deterministic 64-bit sequence used as the entropy source for generation.

The generator is a plain linear congruential recurrence over ``2**64``::

    state = state * 6364136223846793005 + 1  (mod 2**64)

The multiplier is Knuth's MMIX constant.  Reproducibility is the only
requirement, so the constants are fixed forever: changing either one changes
every board ever shared by seed.  The low bits of a power-of-two LCG have short
periods, therefore bounded draws never use ``state % bound``; they take the high
word of the 128-bit product ``next() * bound`` (Lemire's method) with rejection
to stay unbiased.
"""

from __future__ import annotations

import hashlib
from typing import List, MutableSequence, TypeVar

__all__ = ["MULTIPLIER", "INCREMENT", "SeedSequence", "seed_to_state"]

MULTIPLIER = 6364136223846793005
INCREMENT = 1
_MASK64 = (1 << 64) - 1

T = TypeVar("T")


def seed_to_state(seed: str) -> int:
    """Hash ``seed`` to an unsigned 64-bit integer.

    The first eight bytes of the SHA256 digest are read as a big-endian
    integer, which keeps the value stable across processes and platforms.
    """

    if not isinstance(seed, str):
        raise TypeError("seed must be a string")
    digest = hashlib.sha256(seed.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big", signed=False)


class SeedSequence:
    """Replayable LCG owned by a single generation run."""

    __slots__ = ("state",)

    def __init__(self, state: int = 0) -> None:
        self.state = int(state) & _MASK64

    @classmethod
    def from_seed(cls, seed: str) -> "SeedSequence":
        return cls(seed_to_state(seed))

    def reseed(self, state: int) -> None:
        self.state = int(state) & _MASK64

    def clone(self) -> "SeedSequence":
        return SeedSequence(self.state)

    def next(self) -> int:
        """Advance the state and return it."""

        self.state = (self.state * MULTIPLIER + INCREMENT) & _MASK64
        return self.state

    def below(self, bound: int) -> int:
        """Return an integer uniformly drawn from ``range(bound)``."""

        if bound <= 0:
            raise ValueError("bound must be positive")
        product = self.next() * bound
        low = product & _MASK64
        if low < bound:
            threshold = ((1 << 64) - bound) % bound
            while low < threshold:
                product = self.next() * bound
                low = product & _MASK64
        return product >> 64

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Fisher-Yates shuffle of ``items`` in place."""

        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]

    def shuffled(self, items) -> List[T]:
        out = list(items)
        self.shuffle(out)
        return out

    def __repr__(self) -> str:
        return f"SeedSequence(state=0x{self.state:016x})"
