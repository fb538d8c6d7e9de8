"""WorkspaceService — search, inspect, and open workspaces.

Open pipeline: CLASSIFY → REUSE? → CHOOSE LAYOUT → NAME → DISPATCH

Layout priority (highest first): explicit user choice, local override
file, workspace type default, none.
"""

from __future__ import annotations

import itertools
import logging
import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from wsctl.domain.errors import DirectoryUnreadable, WsctlError
from wsctl.domain.session_names import SessionNamer, sanitize_session_name
from wsctl.domain.types import ResolvedLayout, Workspace
from wsctl.infrastructure.tmux import SessionInfo
from wsctl.services.base import BaseService
from wsctl.services.result import ServiceResult
from wsctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

LAYOUT_SOURCE_EXPLICIT = "explicit"
LAYOUT_SOURCE_LOCAL = "local"
LAYOUT_SOURCE_TYPE = "type-default"


@dataclass(frozen=True)
class LayoutChoice:
    """The layout selected for a workspace and where the choice came from."""

    layout: ResolvedLayout
    source: str
    origin: str | None = None  # override file path for local layouts


def _same_path(session_path: str, workspace_path: Path) -> bool:
    if not session_path:
        return False
    return os.path.realpath(session_path) == os.path.realpath(workspace_path)


class WorkspaceService(BaseService):
    """Workspace discovery and session opening."""

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def iter_workspaces(
        self,
        roots: list[Path] | None = None,
        *,
        unreadable: list[DirectoryUnreadable] | None = None,
    ) -> Iterator[Workspace]:
        """Lazy workspace sequence for interactive selection.

        Unreadable directories are appended to *unreadable* when given.
        """
        on_error = unreadable.append if unreadable is not None else None
        return self._catalog.search(roots, on_error=on_error)

    @traced
    def search(self, roots: list[Path] | None = None, *, limit: int | None = None) -> ServiceResult:
        """Search the configured roots and return the matched workspaces."""
        op = "search"
        unreadable: list[DirectoryUnreadable] = []
        found = self.iter_workspaces(roots, unreadable=unreadable)
        if limit is not None:
            found = itertools.islice(found, limit)

        with trace_span("walk") as span:
            items = [ws.as_dict() for ws in found]
            if span:
                span.annotate("found", len(items))

        warnings = [f"Skipped unreadable directory {u.path}: {u.reason}" for u in unreadable]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Layout choice and naming
    # ------------------------------------------------------------------

    def _session_namer(self, used_names: Iterable[str]) -> SessionNamer:
        return SessionNamer(
            used_names,
            self._catalog.settings.session.name_path_components,
            sanitize=sanitize_session_name,
        )

    def choose_layout(
        self, workspace: Workspace, *, explicit: str | None = None
    ) -> LayoutChoice | None:
        """Pick and resolve the layout for *workspace*.

        Raises UnknownLayoutError / CyclicInheritanceError from resolution
        and ConfigError for an unreadable override file.
        """
        if explicit:
            return LayoutChoice(self._catalog.resolve(explicit), LAYOUT_SOURCE_EXPLICIT)

        override = self._catalog.find_override(workspace.path)
        if override is not None:
            override_file, local = override
            return LayoutChoice(
                self._catalog.resolve_definition(local),
                LAYOUT_SOURCE_LOCAL,
                origin=str(override_file),
            )

        default = workspace.chosen_layout_name
        if default is None:
            rule = self._catalog.rule(workspace.type_name)
            default = rule.default_layout if rule else None
        if default:
            return LayoutChoice(self._catalog.resolve(default), LAYOUT_SOURCE_TYPE)
        return None

    @traced
    def inspect(self, path: Path, *, layout: str | None = None) -> ServiceResult:
        """Classify *path* and show the layout that opening it would apply."""
        op = "inspect"
        try:
            workspace = self._catalog.classify(path)
            choice = self.choose_layout(workspace, explicit=layout)
        except WsctlError as exc:
            return ServiceResult.from_error(op, exc)
        except OSError as exc:
            return _unreadable(op, path, exc)

        data: dict[str, Any] = workspace.as_dict()
        data.update(_layout_data(choice))
        data["session"] = self._session_namer(()).name(workspace.path)
        return ServiceResult(ok=True, op=op, data=data)

    # ------------------------------------------------------------------
    # Open
    # ------------------------------------------------------------------

    @traced
    def open(
        self,
        workspace: Workspace | Path,
        *,
        layout: str | None = None,
        session_name: str | None = None,
    ) -> ServiceResult:
        """Create (or reuse) a session for *workspace* and seed its layout.

        Attaching is left to the caller so the result can be reported first.

        Args:
            workspace: A search result, or a directory to open as-is.
            layout: Explicit layout name; beats local and type defaults.
            session_name: Forced session name; skips collision handling.
        """
        op = "open"
        target = workspace if isinstance(workspace, Path) else workspace.path
        try:
            if isinstance(workspace, Path):
                workspace = self._catalog.classify(workspace)

            with trace_span("list_sessions"):
                sessions = self._dispatcher.list_sessions()

            existing = _find_existing(sessions, workspace.path, session_name)
            if existing is not None:
                logger.debug("Reusing session %s for %s", existing.name, workspace.path)
                data = workspace.as_dict()
                data.update({"session": existing.name, "created": False, "commands": []})
                return ServiceResult(ok=True, op=op, data=data)

            with trace_span("resolve_layout"):
                choice = self.choose_layout(workspace, explicit=layout)

            name = session_name or self._session_namer(s.name for s in sessions).name(
                workspace.path
            )

            with trace_span("dispatch") as span:
                self._dispatcher.create_session(
                    name, workspace.path, workspace_type=workspace.type_name
                )
                if choice is not None and choice.layout.commands:
                    self._dispatcher.send_commands(name, choice.layout.commands)
                if span:
                    span.annotate("commands", len(choice.layout) if choice else 0)
        except WsctlError as exc:
            return ServiceResult.from_error(op, exc)
        except OSError as exc:
            return _unreadable(op, target, exc)

        data = workspace.as_dict()
        data.update(_layout_data(choice))
        data.update({"session": name, "created": True})
        return ServiceResult(ok=True, op=op, data=data)


def _find_existing(
    sessions: list[SessionInfo], path: Path, forced_name: str | None
) -> SessionInfo | None:
    if forced_name is not None:
        return next((s for s in sessions if s.name == forced_name), None)
    return next((s for s in sessions if _same_path(s.path, path)), None)


def _layout_data(choice: LayoutChoice | None) -> dict[str, Any]:
    if choice is None:
        return {"layout": None, "layout_source": None, "commands": []}
    data: dict[str, Any] = {
        "layout": choice.layout.name,
        "layout_source": choice.source,
        "commands": list(choice.layout.commands),
    }
    if choice.origin:
        data["layout_file"] = choice.origin
    return data


def _unreadable(op: str, path: Path, exc: OSError) -> ServiceResult:
    return ServiceResult.failure(
        op,
        "DIRECTORY_UNREADABLE",
        f"Cannot read directory {path}: {exc.strerror or exc}",
        detail={"path": str(path)},
    )
