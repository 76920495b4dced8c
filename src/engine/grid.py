# grid.py
# 9x9 grid helpers shared by completion, counting and reduction.

from __future__ import annotations

from typing import List, Sequence, Tuple

__all__ = [
    "SIZE",
    "BOX",
    "DIGITS",
    "Grid",
    "FrozenGrid",
    "empty_grid",
    "grid_copy",
    "freeze",
    "thaw",
    "check_shape",
    "to_string",
    "from_string",
    "format_grid",
    "box_index",
    "is_valid_placement",
    "is_complete_solution",
    "is_consistent",
    "count_empty",
]

SIZE = 9
BOX = 3
DIGITS = tuple(range(1, SIZE + 1))

Grid = List[List[int]]
FrozenGrid = Tuple[Tuple[int, ...], ...]


def empty_grid() -> Grid:
    return [[0] * SIZE for _ in range(SIZE)]


def grid_copy(g: Sequence[Sequence[int]]) -> Grid:
    return [list(row) for row in g]


def freeze(g: Sequence[Sequence[int]]) -> FrozenGrid:
    return tuple(tuple(row) for row in g)


def thaw(g: Sequence[Sequence[int]]) -> Grid:
    return grid_copy(g)


def check_shape(g: Sequence[Sequence[int]]) -> None:
    """Raise ``ValueError`` unless ``g`` is 9x9 with ints in [0, 9]."""

    if len(g) != SIZE:
        raise ValueError(f"grid must have {SIZE} rows, got {len(g)}")
    for r, row in enumerate(g):
        if len(row) != SIZE:
            raise ValueError(f"row {r} must have {SIZE} cells, got {len(row)}")
        for c, v in enumerate(row):
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= SIZE:
                raise ValueError(f"cell ({r}, {c}) must be an int in [0, {SIZE}], got {v!r}")


def box_index(r: int, c: int) -> int:
    return (r // BOX) * BOX + c // BOX


def to_string(g: Sequence[Sequence[int]]) -> str:
    return ''.join(str(g[r][c] or 0) for r in range(SIZE) for c in range(SIZE))


def from_string(s: str) -> Grid:
    s = s.strip().replace("\n", "").replace(" ", "")
    if len(s) != SIZE * SIZE:
        raise ValueError(f"grid string must have {SIZE * SIZE} cells, got {len(s)}")
    grid = []
    k = 0
    for r in range(SIZE):
        row = []
        for c in range(SIZE):
            ch = s[k]; k += 1
            row.append(int(ch) if ch.isdigit() and ch != '0' else 0)
        grid.append(row)
    return grid


def format_grid(g: Sequence[Sequence[int]]) -> str:
    lines = []
    for r in range(SIZE):
        if r % BOX == 0:
            lines.append("+-------+-------+-------+")
        row = []
        for c in range(SIZE):
            v = g[r][c]
            row.append(str(v) if v != 0 else ".")
            if c % BOX == BOX - 1:
                row.append("|")
        lines.append("| " + " ".join(row[:-1]) + " |")
    lines.append("+-------+-------+-------+")
    return "\n".join(lines)


def is_valid_placement(g: Sequence[Sequence[int]], r: int, c: int, d: int) -> bool:
    """True when ``d`` is absent from the row, column and block of ``(r, c)``.

    The cell itself is ignored, so the check also works for filled cells.
    """

    for x in range(SIZE):
        if x != c and g[r][x] == d:
            return False
        if x != r and g[x][c] == d:
            return False
    br = r - r % BOX
    bc = c - c % BOX
    for i in range(br, br + BOX):
        for j in range(bc, bc + BOX):
            if (i, j) != (r, c) and g[i][j] == d:
                return False
    return True


def _is_permutation(values) -> bool:
    return sorted(values) == list(DIGITS)


def is_complete_solution(g: Sequence[Sequence[int]]) -> bool:
    """Every row, column and block is a permutation of 1..9."""

    try:
        check_shape(g)
    except ValueError:
        return False
    for i in range(SIZE):
        if not _is_permutation(g[i]):
            return False
        if not _is_permutation([g[r][i] for r in range(SIZE)]):
            return False
    for b in range(SIZE):
        br = (b // BOX) * BOX
        bc = (b % BOX) * BOX
        if not _is_permutation([g[br + i][bc + j] for i in range(BOX) for j in range(BOX)]):
            return False
    return True


def is_consistent(puzzle: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> bool:
    """Every given of ``puzzle`` equals the matching cell of ``solution``."""

    return all(
        puzzle[r][c] == 0 or puzzle[r][c] == solution[r][c]
        for r in range(SIZE)
        for c in range(SIZE)
    )


def count_empty(g: Sequence[Sequence[int]]) -> int:
    return sum(1 for row in g for v in row if v == 0)
