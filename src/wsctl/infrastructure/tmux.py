"""tmux dispatcher — creates, seeds, and attaches sessions via libtmux.

The resolution engine only decides *what* name to use and *which*
commands to send; everything that touches tmux goes through the
:class:`SessionDispatcher` protocol so services can be tested with a fake.

Layout commands are typed into the session verbatim, one ``send-keys``
per command followed by Enter, in order.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import libtmux
from libtmux.exc import LibTmuxException

from wsctl.domain.errors import DispatchError

logger = logging.getLogger(__name__)

TYPE_ENV_VAR = "WSCTL_TYPE"

_SESSION_FORMAT = "#{session_name}\t#{session_path}"


@dataclass(frozen=True)
class SessionInfo:
    """A running multiplexer session."""

    name: str
    path: str


class SessionDispatcher(Protocol):
    """What the services need from a terminal multiplexer."""

    def list_sessions(self) -> list[SessionInfo]: ...

    def create_session(self, name: str, path: Path, *, workspace_type: str | None) -> None: ...

    def create_grouped_session(self, name: str, target: str) -> None: ...

    def send_commands(self, name: str, commands: Sequence[str]) -> None: ...

    def attach(self, name: str) -> None: ...


def _exact(name: str) -> str:
    # "=" disables tmux's prefix matching on session targets.
    return f"={name}"


class TmuxDispatcher:
    """SessionDispatcher backed by a libtmux server connection."""

    def __init__(self, server: libtmux.Server | None = None) -> None:
        self._server = server

    @property
    def server(self) -> libtmux.Server:
        """Get or create the tmux server connection."""
        if self._server is None:
            self._server = libtmux.Server()
        return self._server

    def _run(self, *args: str) -> list[str]:
        try:
            proc = self.server.cmd(*args)
        except LibTmuxException as exc:
            raise DispatchError(f"tmux {args[0]} failed: {exc}") from exc
        if proc.stderr:
            raise DispatchError(
                f"tmux {args[0]} failed: {' '.join(proc.stderr)}",
                detail={"args": list(args)},
            )
        return list(proc.stdout)

    def list_sessions(self) -> list[SessionInfo]:
        """All running sessions; an absent tmux server means none."""
        try:
            proc = self.server.cmd("list-sessions", "-F", _SESSION_FORMAT)
        except LibTmuxException as exc:
            raise DispatchError(f"tmux list-sessions failed: {exc}") from exc
        if proc.stderr:
            # "no server running" / "error connecting": nothing to list.
            logger.debug("tmux list-sessions: %s", " ".join(proc.stderr))
            return []

        sessions: list[SessionInfo] = []
        for line in proc.stdout:
            name, _, path = line.partition("\t")
            if name:
                sessions.append(SessionInfo(name=name, path=path))
        return sessions

    def create_session(self, name: str, path: Path, *, workspace_type: str | None) -> None:
        environment = {TYPE_ENV_VAR: workspace_type} if workspace_type else None
        try:
            self.server.new_session(
                session_name=name,
                start_directory=str(path),
                attach=False,
                environment=environment,
            )
        except LibTmuxException as exc:
            raise DispatchError(f"Failed to create tmux session {name!r}: {exc}") from exc
        logger.debug("Created tmux session %s at %s", name, path)

    def create_grouped_session(self, name: str, target: str) -> None:
        self._run("new-session", "-d", "-t", _exact(target), "-s", name)
        logger.debug("Created tmux session %s grouped with %s", name, target)

    def send_commands(self, name: str, commands: Sequence[str]) -> None:
        for command in commands:
            self._run("send-keys", "-t", f"{_exact(name)}:", command, "C-m")
        logger.debug("Sent %d command(s) to %s", len(commands), name)

    def attach(self, name: str) -> None:
        """Switch to *name* inside tmux, or replace this process with an attach."""
        if os.environ.get("TMUX"):
            self._run("switch-client", "-t", _exact(name))
            return
        logger.debug("Attaching to %s", name)
        os.execvp("tmux", ["tmux", "attach-session", "-t", _exact(name)])
