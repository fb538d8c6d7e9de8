"""Tests for config discovery and loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from wsctl.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    config_home,
    find_config,
    load_config,
    read_yaml,
)
from wsctl.config.models import WsConfig
from wsctl.domain.errors import ConfigError


def _xdg_home() -> Path:
    return Path(os.environ["XDG_CONFIG_HOME"])


class TestFindConfig:
    def test_xdg_config_home(self) -> None:
        cfg = _xdg_home() / "wsctl" / CONFIG_FILENAME
        cfg.parent.mkdir(parents=True)
        cfg.write_text("")
        assert find_config() == cfg

    def test_xdg_config_dirs(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        system = tmp_path / "system"
        cfg = system / "wsctl" / CONFIG_FILENAME
        cfg.parent.mkdir(parents=True)
        cfg.write_text("")
        monkeypatch.setenv("XDG_CONFIG_DIRS", os.pathsep.join([str(tmp_path / "x"), str(system)]))
        assert find_config() == cfg

    def test_user_config_beats_system(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        user = _xdg_home() / "wsctl" / CONFIG_FILENAME
        user.parent.mkdir(parents=True)
        user.write_text("")
        system = tmp_path / "system" / "wsctl" / CONFIG_FILENAME
        system.parent.mkdir(parents=True)
        system.write_text("")
        monkeypatch.setenv("XDG_CONFIG_DIRS", str(tmp_path / "system"))
        assert find_config() == user

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.yaml"
        custom.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        assert find_config() == custom

    def test_env_var_to_missing_file_has_no_fallback(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        user = _xdg_home() / "wsctl" / CONFIG_FILENAME
        user.parent.mkdir(parents=True)
        user.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "typo.yaml"))
        assert find_config() is None

    def test_none_found(self) -> None:
        assert find_config() is None

    def test_config_home_defaults_to_dot_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME")
        assert config_home() == Path.home() / ".config" / "wsctl"


class TestReadYaml:
    def test_empty_file(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.yaml"
        f.write_text("")
        assert read_yaml(f) == {}

    def test_non_mapping(self, tmp_path: Path) -> None:
        f = tmp_path / "list.yaml"
        f.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            read_yaml(f)

    def test_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="cannot read"):
            read_yaml(tmp_path / "missing.yaml")


class TestLoadConfig:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        f = tmp_path / CONFIG_FILENAME
        f.write_text(
            "search:\n  paths: [~/dev]\n  max_depth: 2\n"
            "workspace_definitions:\n  - name: rust\n    has_all_files: [Cargo.toml]\n"
            "layouts:\n  - name: editor\n    commands: [nvim]\n"
        )
        cfg = load_config(f)
        assert cfg.search.paths == ["~/dev"]
        assert cfg.search.max_depth == 2
        assert cfg.search.follow_links is False  # default
        assert cfg.workspace_definitions is not None
        assert cfg.workspace_definitions[0].has_all_files == ["Cargo.toml"]
        assert cfg.layouts[0].commands == ["nvim"]

    def test_returns_defaults_when_no_file(self) -> None:
        assert load_config() == WsConfig()

    def test_unknown_key_is_rejected(self, tmp_path: Path) -> None:
        f = tmp_path / CONFIG_FILENAME
        f.write_text("serch:\n  paths: [/]\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(f)
        assert exc_info.value.path == f

    def test_invalid_value(self, tmp_path: Path) -> None:
        f = tmp_path / CONFIG_FILENAME
        f.write_text("search:\n  max_depth: -1\n")
        with pytest.raises(ConfigError):
            load_config(f)
