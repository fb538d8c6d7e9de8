"""Tests for WsSettings — unified settings with YAML source."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from wsctl.config.settings import WsSettings
from wsctl.domain.errors import ConfigError

WriteConfig = Callable[[dict[str, Any]], Path]


class TestWsSettingsDefaults:
    def test_all_defaults(self) -> None:
        settings = WsSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.search.max_depth == 3
        assert settings.workspace_definitions is None

    def test_frozen(self) -> None:
        settings = WsSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestYamlSource:
    def test_loads_discovered_file(self, write_config: WriteConfig) -> None:
        path = write_config({"search": {"max_depth": 5}, "layouts": [{"name": "a"}]})
        settings = WsSettings.from_cli()
        assert settings.config_path == path
        assert settings.search.max_depth == 5
        assert settings.search.paths == ["~"]  # default preserved
        assert settings.layouts[0].name == "a"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "my.yaml"
        custom.write_text("session:\n  name_path_components: 2\n")
        settings = WsSettings.from_cli(config_path=str(custom))
        assert settings.session.name_path_components == 2
        assert settings.config_path == custom

    def test_explicit_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="file not found"):
            WsSettings.from_cli(config_path=str(tmp_path / "nope.yaml"))

    def test_invalid_yaml_raises_config_error(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("search: [\n")
        with pytest.raises(ConfigError):
            WsSettings.from_cli(config_path=str(bad))


class TestPriority:
    def test_env_beats_yaml(
        self, write_config: WriteConfig, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        write_config({"search": {"max_depth": 5}})
        monkeypatch.setenv("WSCTL_SEARCH__MAX_DEPTH", "1")
        assert WsSettings.from_cli().search.max_depth == 1

    def test_cli_flag_beats_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WSCTL_QUIET", "false")
        assert WsSettings.from_cli(quiet=True).quiet is True
