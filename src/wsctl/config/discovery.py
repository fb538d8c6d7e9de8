"""Config file discovery and loading.

Lookup order for ``wsctl.yaml``:

1. ``WSCTL_CONFIG`` env var (used as-is, no fallback).
2. ``$XDG_CONFIG_HOME/wsctl/wsctl.yaml`` (``~/.config`` when unset).
3. ``<dir>/wsctl/wsctl.yaml`` for each entry of ``$XDG_CONFIG_DIRS``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from wsctl.config.models import WsConfig
from wsctl.domain.errors import ConfigError

APP_NAME = "wsctl"
CONFIG_FILENAME = "wsctl.yaml"
CONFIG_ENV_VAR = "WSCTL_CONFIG"


def config_home() -> Path:
    """The user's config directory for wsctl (may not exist yet)."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base).expanduser() / APP_NAME


def _config_dirs() -> list[Path]:
    dirs = [config_home()]
    raw = os.environ.get("XDG_CONFIG_DIRS", "/etc/xdg")
    dirs.extend(Path(d).expanduser() / APP_NAME for d in raw.split(os.pathsep) if d)
    return dirs


def find_config() -> Path | None:
    """Locate ``wsctl.yaml``; returns None when no file exists.

    An explicit ``WSCTL_CONFIG`` wins even if it points at a missing file,
    so a typo there is not silently replaced by another config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path).expanduser()
        return p if p.is_file() else None

    for directory in _config_dirs():
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_yaml(path: Path) -> dict[str, Any]:
    """Parse a YAML mapping from *path*; an empty file yields ``{}``."""
    try:
        data = YAML(typ="safe").load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeError) as exc:
        raise ConfigError(path, f"cannot read file ({exc})") from exc
    except YAMLError as exc:
        raise ConfigError(path, f"invalid YAML ({exc})") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(path, "top level must be a mapping")
    return data


def load_config(path: Path | None = None) -> WsConfig:
    """Load and validate config from a YAML file.

    If *path* is None, uses :func:`find_config` to discover the file.
    Returns the default :class:`WsConfig` if no file is found.
    """
    if path is None:
        path = find_config()

    if path is None:
        return WsConfig()

    data = read_yaml(path)
    try:
        return WsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(path, str(exc)) from exc
