"""ConfigService — write, describe, and show the configuration."""

from __future__ import annotations

import json
from pathlib import Path

from wsctl.config.discovery import CONFIG_FILENAME, config_home
from wsctl.config.models import LocalLayoutFile, WsConfig
from wsctl.config.settings import WsSettings
from wsctl.services.result import ServiceResult
from wsctl.services.telemetry import traced

DEFAULT_CONFIG = """\
# wsctl configuration. Every key is optional; the values below are the defaults.

search:
  # Directories searched for workspaces, in order. "~" is expanded.
  paths: ["~"]
  # How many levels below each search path are examined (0 = the path only).
  max_depth: 3
  # Directory names never descended into, e.g. [node_modules, target, .venv]
  exclude_path_components: []
  # Descend into symlinked directories. Each real directory is visited once.
  follow_links: false
  # Stop descending once a directory is identified as a workspace.
  prune_matched: true

session:
  # Trailing path components used for session names; grows on collision.
  name_path_components: 1

local:
  # Files holding a per-directory layout, looked up from the workspace upwards.
  filenames: [.wsctl.yaml, .wsctl.yml]

# Workspace types, tried in order. Leave unset to match version-control
# roots (.git, .hg, .jj, .svn) and directories with a local layout file.
#
# workspace_definitions:
#   - name: python
#     has_any_file: [pyproject.toml, setup.py]
#     default_layout: python
#   - name: rust
#     has_all_files: [Cargo.toml]
#     missing_any_file: [.nobuild]
#     default_layout: rust

# Layouts are lists of commands typed into a new session. A layout runs
# the commands of every layout it inherits first, in order.
#
# layouts:
#   - name: editor
#     commands: ["nvim ."]
#   - name: python
#     inherits: [editor]
#     commands: ["source .venv/bin/activate"]
layouts: []
"""


class ConfigService:
    """Configuration file operations.

    Unlike the other services this one does not need a Catalog: writing a
    default file or printing the schema must work before any config exists.
    """

    def __init__(self, settings: WsSettings | None = None) -> None:
        self._settings = settings

    @traced
    def init(self, directory: Path | None = None, *, force: bool = False) -> ServiceResult:
        """Write a commented default ``wsctl.yaml`` into *directory*.

        Defaults to the user config directory. An existing file is kept
        unless *force* is set.
        """
        op = "config_init"
        target = (directory or config_home()) / CONFIG_FILENAME
        if target.exists() and not force:
            return ServiceResult.failure(
                op,
                "CONFIG_EXISTS",
                f"{target} already exists (use --force to overwrite)",
                detail={"path": str(target)},
            )
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(DEFAULT_CONFIG, encoding="utf-8")
        except OSError as exc:
            return ServiceResult.failure(
                op,
                "CONFIG_WRITE_FAILED",
                f"Cannot write {target}: {exc.strerror or exc}",
                detail={"path": str(target)},
            )
        return ServiceResult(ok=True, op=op, data={"path": str(target)})

    @traced
    def schema(self, *, local: bool = False) -> ServiceResult:
        """JSON schema of ``wsctl.yaml``, or of a local layout file."""
        model = LocalLayoutFile if local else WsConfig
        return ServiceResult(
            ok=True,
            op="config_schema",
            data={"schema": model.model_json_schema()},
        )

    @traced
    def show(self) -> ServiceResult:
        """The effective configuration after merging file, env and defaults."""
        op = "config_show"
        if self._settings is None:
            return ServiceResult.failure(op, "CONFIG_INVALID", "No settings loaded")
        config = WsConfig.model_validate(
            self._settings.model_dump(
                include={"search", "session", "local", "workspace_definitions", "layouts"}
            )
        )
        source = self._settings.config_path
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "file": str(source) if source else None,
                "config": json.loads(config.model_dump_json(exclude_none=True)),
            },
        )
