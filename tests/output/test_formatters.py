"""Tests for output mode selection."""

from __future__ import annotations

import json

from wsctl.output.console import create_console, get_output
from wsctl.output.formatters import OutputSettings, format_result
from wsctl.services.result import ServiceResult

RESULT = ServiceResult(ok=True, op="sessions", data={"items": [{"name": "api", "path": "/w"}]})


class TestFormatResult:
    def test_json(self) -> None:
        payload = json.loads(format_result(RESULT, settings=OutputSettings(json_output=True)))
        assert payload["op"] == "sessions"
        assert payload["data"]["items"][0]["name"] == "api"

    def test_json_wins_over_quiet(self) -> None:
        out = format_result(RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["ok"] is True

    def test_quiet(self) -> None:
        assert format_result(RESULT, settings=OutputSettings(quiet=True)) == "api"

    def test_default_is_rich(self) -> None:
        out = format_result(RESULT)
        assert "Session" in out
        assert "api" in out


class TestConsole:
    def test_buffered_console(self) -> None:
        console = create_console(no_color=True, width=40)
        console.print("hello")
        assert get_output(console) == "hello\n"
