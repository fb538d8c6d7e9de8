"""Tests for SessionService."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from wsctl.infrastructure.catalog import Catalog
from wsctl.infrastructure.tmux import SessionInfo
from wsctl.services.session import SessionService


@pytest.fixture
def svc(make_catalog: Callable[..., Catalog], dispatcher: Any) -> SessionService:
    dispatcher.sessions.extend([SessionInfo("api", "/w/api"), SessionInfo("api-1", "/w/api")])
    return SessionService(make_catalog(), dispatcher)


class TestSessions:
    def test_list(self, svc: SessionService) -> None:
        result = svc.list_sessions()
        assert result.ok
        assert result.data["items"] == [
            {"name": "api", "path": "/w/api"},
            {"name": "api-1", "path": "/w/api"},
        ]

    def test_check_exists(self, svc: SessionService) -> None:
        assert svc.check_exists("api").ok
        missing = svc.check_exists("web")
        assert missing.error is not None
        assert missing.error.code == "NO_SUCH_SESSION"

    def test_attach_delegates(self, svc: SessionService, dispatcher: Any) -> None:
        svc.attach("api")
        assert dispatcher.attached == ["api"]


class TestGroup:
    def test_next_free_suffix(self, svc: SessionService, dispatcher: Any) -> None:
        result = svc.group("api")
        assert result.ok
        assert result.data["session"] == "api-2"
        assert dispatcher.grouped == [("api-2", "api")]

    def test_unknown_target(self, svc: SessionService, dispatcher: Any) -> None:
        result = svc.group("web")
        assert not result.ok
        assert dispatcher.grouped == []
