"""Shared pytest fixtures and test helpers for wsctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from ruamel.yaml import YAML

from wsctl.config.settings import WsSettings
from wsctl.domain.errors import DispatchError
from wsctl.infrastructure.catalog import Catalog
from wsctl.infrastructure.tmux import SessionInfo
from wsctl.services.telemetry import disable_telemetry


class FakeDispatcher:
    """In-memory SessionDispatcher that records every call."""

    def __init__(self, sessions: Iterable[SessionInfo] = ()) -> None:
        self.sessions: list[SessionInfo] = list(sessions)
        self.created: list[tuple[str, Path, str | None]] = []
        self.grouped: list[tuple[str, str]] = []
        self.sent: dict[str, list[str]] = {}
        self.attached: list[str] = []

    def list_sessions(self) -> list[SessionInfo]:
        return list(self.sessions)

    def _check_free(self, name: str) -> None:
        if any(s.name == name for s in self.sessions):
            raise DispatchError(f"duplicate session: {name}")

    def create_session(self, name: str, path: Path, *, workspace_type: str | None) -> None:
        self._check_free(name)
        self.created.append((name, path, workspace_type))
        self.sessions.append(SessionInfo(name=name, path=str(path)))

    def create_grouped_session(self, name: str, target: str) -> None:
        self._check_free(name)
        self.grouped.append((name, target))
        path = next(s.path for s in self.sessions if s.name == target)
        self.sessions.append(SessionInfo(name=name, path=path))

    def send_commands(self, name: str, commands: Sequence[str]) -> None:
        self.sent.setdefault(name, []).extend(commands)

    def attach(self, name: str) -> None:
        self.attached.append(name)


@pytest.fixture(autouse=True)
def _isolated_env(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Keep the user's real config, tmux and env vars out of every test.

    Also restores the logging setup the CLI replaces on every invocation.
    """
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    ws_level = logging.getLogger("wsctl").level

    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_CONFIG_DIRS", str(home / "etc-xdg"))
    monkeypatch.delenv("TMUX", raising=False)
    for key in list(os.environ):
        if key.startswith("WSCTL_"):
            monkeypatch.delenv(key)
    yield
    disable_telemetry()
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    logging.getLogger("wsctl").setLevel(ws_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create files and directories under a fresh root.

    Entries ending in ``/`` are directories; everything else is an empty
    file (parents created as needed). Returns the root.
    """

    def _make(*entries: str, root: Path | None = None) -> Path:
        base = root or tmp_path / "tree"
        base.mkdir(parents=True, exist_ok=True)
        for entry in entries:
            target = base / entry
            if entry.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.touch()
        return base

    return _make


def dump_yaml(path: Path, data: Any) -> Path:
    """Write *data* as YAML to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    yaml = YAML(typ="safe")
    yaml.default_flow_style = False
    with path.open("w", encoding="utf-8") as fh:
        yaml.dump(data, fh)
    return path


@pytest.fixture
def write_config() -> Callable[[dict[str, Any]], Path]:
    """Write a wsctl.yaml into the isolated XDG config home."""

    def _write(data: dict[str, Any]) -> Path:
        return dump_yaml(Path(os.environ["XDG_CONFIG_HOME"]) / "wsctl" / "wsctl.yaml", data)

    return _write


@pytest.fixture
def write_local() -> Callable[[Path, dict[str, Any]], Path]:
    """Write a local layout override file (``.wsctl.yaml``) into a directory."""

    def _write(directory: Path, layout: dict[str, Any]) -> Path:
        return dump_yaml(directory / ".wsctl.yaml", {"layout": layout})

    return _write


@pytest.fixture
def make_catalog() -> Callable[..., Catalog]:
    """Build a Catalog from settings keyword arguments (no config file)."""

    def _make(**settings: Any) -> Catalog:
        return Catalog(WsSettings(**settings))

    return _make


@pytest.fixture
def dispatcher() -> FakeDispatcher:
    return FakeDispatcher()


@pytest.fixture
def fake_tmux(monkeypatch: pytest.MonkeyPatch) -> FakeDispatcher:
    """Replace the tmux dispatcher used by the CLI with a FakeDispatcher."""
    fake = FakeDispatcher()
    monkeypatch.setattr("wsctl.infrastructure.tmux.TmuxDispatcher", lambda: fake)
    return fake
