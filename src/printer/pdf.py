"""Render boards into a landscape A4 PDF, several puzzles per page."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.backends.backend_pdf import PdfPages  # noqa: E402

from engine.board import Board  # noqa: E402
from project_config import get_section  # noqa: E402

INCH_PER_CM = 0.3937007874
PAGE_WIDTH_CM = 29.7
PAGE_HEIGHT_CM = 21.0
FOOTER_OFFSET_CM = 1.0
FONT_SCALE = 0.65


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def layout_defaults() -> Dict[str, Any]:
    cfg = _as_dict(get_section("pdf", default={}))
    return {
        "rows": int(cfg.get("rows", 2)),
        "cols": int(cfg.get("cols", 2)),
        "margin_cm": float(cfg.get("margin_cm", 3.0)),
        "gap_cm": float(cfg.get("gap_cm", 1.5)),
    }


def _draw_grid(ax, page_w_in: float, page_h_in: float, grid, left_in: float, bottom_in: float, size_in: float, caption: str) -> None:
    ax.set_position([left_in / page_w_in, bottom_in / page_h_in, size_in / page_w_in, size_in / page_h_in])
    for i in range(10):
        lw = 1.0 if i % 3 else 2.5
        ax.axvline(i / 9, color="k", linewidth=lw)
        ax.axhline(i / 9, color="k", linewidth=lw)
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.axis("off")
    fs = max(4, int(FONT_SCALE * size_in * 72 / 9))
    for r in range(9):
        for c in range(9):
            v = grid[r][c]
            if v:
                ax.text((c + 0.5) / 9, 1 - (r + 0.5) / 9, str(v), ha="center", va="center", fontsize=fs)
    ax.text(0.0, 1.02, caption, ha="left", va="bottom", fontsize=max(6, fs // 2), transform=ax.transAxes)


def export_pdf(
    boards: Sequence[Board],
    out_path: str | Path,
    *,
    rows: Optional[int] = None,
    cols: Optional[int] = None,
    margin_cm: Optional[float] = None,
    gap_cm: Optional[float] = None,
    solutions: bool = False,
) -> Path:
    """Write ``boards`` to ``out_path`` and return the path.

    Each puzzle is captioned with its difficulty and board id so a printed
    board can be looked up again.  With ``solutions=True`` the solution grids
    are printed instead of the puzzles.
    """

    if not boards:
        raise ValueError("at least one board is required")
    defaults = layout_defaults()
    rows = rows or defaults["rows"]
    cols = cols or defaults["cols"]
    margin_in = (defaults["margin_cm"] if margin_cm is None else margin_cm) * INCH_PER_CM
    gap_in = (defaults["gap_cm"] if gap_cm is None else gap_cm) * INCH_PER_CM

    page_w_in = PAGE_WIDTH_CM * INCH_PER_CM
    page_h_in = PAGE_HEIGHT_CM * INCH_PER_CM
    avail_w = page_w_in - 2 * margin_in - (cols - 1) * gap_in
    avail_h = page_h_in - 2 * margin_in - (rows - 1) * gap_in
    grid_size = min(avail_w / cols, avail_h / rows)
    if grid_size <= 0:
        raise ValueError("margins and gaps leave no room for a grid")

    lefts = [margin_in + col * (grid_size + gap_in) for col in range(cols)]
    bottoms = [page_h_in - margin_in - (row + 1) * grid_size - row * gap_in for row in range(rows)]
    footer_y = (FOOTER_OFFSET_CM * INCH_PER_CM) / page_h_in

    per_page = rows * cols
    pages = math.ceil(len(boards) / per_page)
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    with PdfPages(out) as pdf:
        for page in range(pages):
            fig = plt.figure(figsize=(page_w_in, page_h_in))
            page_boards: List[Board] = list(boards[page * per_page:(page + 1) * per_page])
            for slot, board in enumerate(page_boards):
                ax = fig.add_axes([0, 0, 1, 1], frameon=False)
                grid = board.solution if solutions else board.puzzle
                caption = f"{board.difficulty.value} #{board.id}"
                _draw_grid(ax, page_w_in, page_h_in, grid, lefts[slot % cols], bottoms[slot // cols], grid_size, caption)
            fig.text(0.5, footer_y, f"Page {page + 1}/{pages}", ha="center", va="bottom", fontsize=8)
            pdf.savefig(fig)
            plt.close(fig)
    return out


__all__ = ["export_pdf", "layout_defaults"]
