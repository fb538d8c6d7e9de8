"""SessionService — running sessions, attaching, and grouped sessions."""

from __future__ import annotations

from wsctl.domain.errors import WsctlError
from wsctl.domain.session_names import group_session_name
from wsctl.services.base import BaseService
from wsctl.services.result import ServiceResult
from wsctl.services.telemetry import traced


class SessionService(BaseService):
    """Operations on sessions that already exist."""

    @traced
    def list_sessions(self) -> ServiceResult:
        op = "sessions"
        try:
            sessions = self._dispatcher.list_sessions()
        except WsctlError as exc:
            return ServiceResult.from_error(op, exc)
        items = [{"name": s.name, "path": s.path} for s in sessions]
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    def session_names(self) -> list[str]:
        """Names of running sessions, for the interactive picker."""
        return [s.name for s in self._dispatcher.list_sessions()]

    @traced
    def check_exists(self, name: str) -> ServiceResult:
        """Succeed only when a session called *name* is running."""
        op = "session_attach"
        try:
            names = self.session_names()
        except WsctlError as exc:
            return ServiceResult.from_error(op, exc)
        if name not in names:
            return ServiceResult.failure(
                op,
                "NO_SUCH_SESSION",
                f"No running session named {name!r}",
                detail={"name": name, "available": names},
            )
        return ServiceResult(ok=True, op=op, data={"session": name})

    def attach(self, name: str) -> None:
        """Attach to *name*; may replace the current process."""
        self._dispatcher.attach(name)

    @traced
    def group(self, target: str) -> ServiceResult:
        """Create a new session sharing windows with *target*.

        The new session is named ``<target>-N`` with the lowest free N.
        """
        op = "session_group"
        try:
            names = self.session_names()
            if target not in names:
                return ServiceResult.failure(
                    op,
                    "NO_SUCH_SESSION",
                    f"No running session named {target!r}",
                    detail={"name": target, "available": names},
                )
            name = group_session_name(target, names)
            self._dispatcher.create_grouped_session(name, target)
        except WsctlError as exc:
            return ServiceResult.from_error(op, exc)
        return ServiceResult(
            ok=True, op=op, data={"session": name, "target": target, "created": True}
        )
