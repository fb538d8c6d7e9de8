"""Unified settings — CLI flags, env vars, and YAML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``WSCTL_*`` prefix, ``__`` for nested keys
                    (e.g. ``WSCTL_SEARCH__MAX_DEPTH=5``)
  3. YAML file    — ``wsctl.yaml`` located by :func:`find_config`
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`YamlSettingsSource`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from wsctl.config.discovery import find_config, read_yaml
from wsctl.config.models import (
    LayoutConfig,
    LocalConfig,
    SearchConfig,
    SessionConfig,
    WorkspaceDefinitionConfig,
)
from wsctl.domain.errors import ConfigError


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``wsctl.yaml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], yaml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if yaml_path and yaml_path.is_file():
            self._data = read_yaml(yaml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full YAML mapping for Pydantic to merge."""
        return self._data


# Thread-local storage for the YAML path during construction.
_tls = threading.local()


class WsSettings(BaseSettings):
    """Unified settings for the whole wsctl CLI.

    Stored on the :class:`~wsctl.commands._context.AppContext` at the CLI
    root and read by every command.

    Attributes:
        config_path: The YAML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "WSCTL_",
        "env_nested_delimiter": "__",
        "extra": "forbid",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- wsctl.yaml sections (reuse the frozen models) ---
    search: SearchConfig = Field(default_factory=SearchConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    local: LocalConfig = Field(default_factory=LocalConfig)
    workspace_definitions: list[WorkspaceDefinitionConfig] | None = None
    layouts: list[LayoutConfig] = Field(default_factory=list)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source between env vars and defaults."""
        yaml_path = getattr(_tls, "yaml_path", None)
        return (
            init_settings,
            env_settings,
            YamlSettingsSource(settings_cls, yaml_path),
        )

    @classmethod
    def from_cli(cls, *, config_path: str | None = None, **cli_flags: Any) -> WsSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise discovers
        ``wsctl.yaml``. CLI flags are merged as highest-priority overrides.
        """
        yaml_path: Path | None
        if config_path:
            yaml_path = Path(config_path).expanduser()
            if not yaml_path.is_file():
                raise ConfigError(yaml_path, "file not found")
        else:
            yaml_path = find_config()

        _tls.yaml_path = yaml_path
        try:
            return cls(config_path=yaml_path, **cli_flags)
        finally:
            _tls.yaml_path = None
