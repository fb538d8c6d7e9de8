"""Parametrized --help and --examples tests for every CLI command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from wsctl.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["open", "--help"], ["--path", "--layout", "--pick-layout", "--name", "--dont-attach"]),
    (["list", "--help"], ["ROOTS", "--limit"]),
    (["inspect", "--help"], ["PATH", "--layout"]),
    (["layout", "--help"], ["list", "show"]),
    (["layout", "show", "--help"], ["NAME", "--path"]),
    (["session", "--help"], ["list", "attach", "group"]),
    (["session", "group", "--help"], ["TARGET", "--dont-attach"]),
    (["config", "--help"], ["init", "schema", "show"]),
    (["config", "init", "--help"], ["DIRECTORY", "--force"]),
    (["config", "schema", "--help"], ["--local"]),
]

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["open", "--examples"], ["wsctl open -p", "--pick-layout"]),
    (["list", "--examples"], ["wsctl list --limit 20"]),
    (["inspect", "--examples"], ["wsctl inspect ."]),
    (["layout", "--examples"], ["wsctl layout list", "wsctl layout show"]),
    (["layout", "show", "--examples"], ["--path"]),
    (["session", "--examples"], ["wsctl session group"]),
    (["session", "attach", "--examples"], ["wsctl session attach api"]),
    (["config", "--examples"], ["wsctl config init", "wsctl config schema"]),
    (["config", "show", "--examples"], ["wsctl --json config show"]),
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    HELP_COMMANDS,
    ids=[" ".join(args) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    for kw in keywords:
        assert kw in result.output, f"{kw!r} missing from {' '.join(args)}"


@pytest.mark.parametrize(
    ("args", "keywords"),
    EXAMPLES_COMMANDS,
    ids=[" ".join(args) for args, _ in EXAMPLES_COMMANDS],
)
def test_examples(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for kw in keywords:
        assert kw in result.output


def test_examples_not_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["open", "--help"])
    assert "wsctl open -p ~/dev/wsctl" not in result.output
    assert "--examples" in result.output
