# counter.py
# Bounded solution counting used as the uniqueness oracle during reduction.

from __future__ import annotations

from typing import List, Sequence, Tuple

from .grid import SIZE, box_index, check_shape

__all__ = ["DEFAULT_CAP", "count_solutions", "has_unique_solution"]

DEFAULT_CAP = 2

# candidate bitmask: digit d <-> bit d-1
FULL = (1 << SIZE) - 1


def count_solutions(grid: Sequence[Sequence[int]], cap: int = DEFAULT_CAP) -> int:
    """Count completions of ``grid``, stopping once ``cap`` have been found.

    The result is ``min(actual, cap)``: 0 means no completion (this includes
    grids whose givens already conflict), 1 means unique.  The search runs on
    private masks and a private cell list; ``grid`` itself is only read.
    """

    if cap < 1:
        raise ValueError("cap must be at least 1")
    check_shape(grid)

    row_mask = [0] * SIZE
    col_mask = [0] * SIZE
    box_mask = [0] * SIZE
    empties: List[Tuple[int, int, int]] = []

    for r in range(SIZE):
        for c in range(SIZE):
            v = grid[r][c]
            b = box_index(r, c)
            if v == 0:
                empties.append((r, c, b))
                continue
            bit = 1 << (v - 1)
            if (row_mask[r] | col_mask[c] | box_mask[b]) & bit:
                return 0
            row_mask[r] |= bit
            col_mask[c] |= bit
            box_mask[b] |= bit

    found = 0

    def search(remaining: int) -> bool:
        """Return ``True`` once the cap is reached."""

        nonlocal found
        if remaining == 0:
            found += 1
            return found >= cap

        # MRV: fill the open cell with the fewest candidates first
        best = -1
        best_mask = 0
        best_count = SIZE + 1
        for i in range(remaining):
            r, c, b = empties[i]
            m = FULL & ~(row_mask[r] | col_mask[c] | box_mask[b])
            k = bin(m).count("1")
            if k < best_count:
                best, best_mask, best_count = i, m, k
                if k <= 1:
                    break
        if best_count == 0:
            return False

        last = remaining - 1
        empties[best], empties[last] = empties[last], empties[best]
        r, c, b = empties[last]

        stop = False
        m = best_mask
        while m and not stop:
            bit = m & -m
            m ^= bit
            row_mask[r] |= bit
            col_mask[c] |= bit
            box_mask[b] |= bit
            stop = search(last)
            row_mask[r] ^= bit
            col_mask[c] ^= bit
            box_mask[b] ^= bit

        empties[best], empties[last] = empties[last], empties[best]
        return stop

    search(len(empties))
    return found


def has_unique_solution(grid: Sequence[Sequence[int]]) -> bool:
    return count_solutions(grid, cap=DEFAULT_CAP) == 1
