from __future__ import annotations

import pytest

from engine.difficulty import Difficulty
from engine.generator import generate
from printer.pdf import export_pdf, layout_defaults


def test_layout_defaults_follow_config(write_config) -> None:
    write_config("[pdf]\nrows = 3\n")
    layout = layout_defaults()
    assert layout["rows"] == 3
    assert layout["cols"] == 2
    assert layout["margin_cm"] == 3.0


def test_export_writes_a_pdf(tmp_path) -> None:
    boards = [generate(Difficulty.EASY, f"pdf-{i}") for i in range(5)]
    out = export_pdf(boards, tmp_path / "out" / "boards.pdf")
    assert out.exists()
    assert out.read_bytes().startswith(b"%PDF")


def test_export_solutions(tmp_path) -> None:
    board = generate(Difficulty.EXPERT, "pdf-solution")
    out = export_pdf([board], tmp_path / "solutions.pdf", rows=1, cols=1, solutions=True)
    assert out.read_bytes().startswith(b"%PDF")


def test_export_rejects_bad_input(tmp_path) -> None:
    with pytest.raises(ValueError):
        export_pdf([], tmp_path / "empty.pdf")
    board = generate(Difficulty.EASY, "pdf-margins")
    with pytest.raises(ValueError):
        export_pdf([board], tmp_path / "tight.pdf", margin_cm=20.0)
