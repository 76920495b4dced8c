from __future__ import annotations

import pytest

import project_config


def test_repository_config_is_loaded() -> None:
    project_config.reload()
    assert project_config.get_section("difficulty.removals.Easy") == 30
    assert project_config.get_section("batch.max_attempts") == 3


def test_env_var_overrides_path(write_config) -> None:
    write_config('[batch]\nworkers = 4\n')
    assert project_config.get_section("batch.workers") == 4
    assert project_config.get_section("batch.max_attempts", default=None) is None


def test_missing_file_means_empty_config(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv(project_config.CONFIG_ENV_VAR, str(tmp_path / "absent.toml"))
    project_config.reload()
    try:
        assert project_config.get_config() == {}
        assert project_config.get_section("store.path", default="fallback") == "fallback"
    finally:
        monkeypatch.delenv(project_config.CONFIG_ENV_VAR)
        project_config.reload()


def test_missing_key_without_default_raises(write_config) -> None:
    write_config("[store]\n")
    with pytest.raises(KeyError):
        project_config.get_section("store.path")
