from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

import pytest

import project_config


@pytest.fixture
def write_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str], Path]]:
    """Point the project configuration at a temporary TOML file."""

    def _write(text: str) -> Path:
        path = tmp_path / "config.toml"
        path.write_text(text, encoding="utf-8")
        monkeypatch.setenv(project_config.CONFIG_ENV_VAR, str(path))
        project_config.reload()
        return path

    yield _write
    monkeypatch.delenv(project_config.CONFIG_ENV_VAR, raising=False)
    project_config.reload()
