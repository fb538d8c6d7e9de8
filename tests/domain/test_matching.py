"""Tests for workspace-type matching and classification."""

from __future__ import annotations

import pytest

from wsctl.domain.matching import (
    classify,
    classify_builtin,
    classify_match,
    first_match,
    has_all_files,
    has_any_file,
    matches,
    missing_all_files,
    missing_any_file,
)
from wsctl.domain.types import BUILTIN_LOCAL_TYPE, BUILTIN_VCS_TYPE, WorkspaceTypeRule

PRESENT = frozenset({"Cargo.toml", "README.md", ".git"})


class TestConditions:
    @pytest.mark.parametrize(
        ("files", "expected"),
        [
            ((), True),
            (("Cargo.toml",), True),
            (("pyproject.toml", "Cargo.toml"), True),
            (("pyproject.toml",), False),
        ],
    )
    def test_has_any_file(self, files: tuple[str, ...], expected: bool) -> None:
        assert has_any_file(files, PRESENT) is expected

    @pytest.mark.parametrize(
        ("files", "expected"),
        [
            ((), True),
            (("Cargo.toml", "README.md"), True),
            (("Cargo.toml", "pyproject.toml"), False),
        ],
    )
    def test_has_all_files(self, files: tuple[str, ...], expected: bool) -> None:
        assert has_all_files(files, PRESENT) is expected

    @pytest.mark.parametrize(
        ("files", "expected"),
        [
            ((), True),
            (("Cargo.toml", "pyproject.toml"), True),
            (("Cargo.toml", "README.md"), False),
        ],
    )
    def test_missing_any_file(self, files: tuple[str, ...], expected: bool) -> None:
        assert missing_any_file(files, PRESENT) is expected

    @pytest.mark.parametrize(
        ("files", "expected"),
        [
            ((), True),
            (("pyproject.toml", "setup.py"), True),
            (("pyproject.toml", "Cargo.toml"), False),
        ],
    )
    def test_missing_all_files(self, files: tuple[str, ...], expected: bool) -> None:
        assert missing_all_files(files, PRESENT) is expected


class TestMatches:
    def test_catch_all_matches_anything(self) -> None:
        rule = WorkspaceTypeRule(name="any")
        assert matches(rule, frozenset())
        assert matches(rule, PRESENT)

    def test_conditions_are_conjunctive(self) -> None:
        rule = WorkspaceTypeRule(
            name="rust",
            has_all_files=("Cargo.toml",),
            missing_any_file=(".nobuild",),
        )
        assert matches(rule, PRESENT)
        assert not matches(rule, PRESENT | {".nobuild"})

    def test_single_failing_condition_rejects(self) -> None:
        rule = WorkspaceTypeRule(
            name="x", has_any_file=("Cargo.toml",), missing_all_files=("README.md",)
        )
        assert not matches(rule, PRESENT)


class TestClassify:
    RULES = (
        WorkspaceTypeRule(name="rust", has_any_file=("Cargo.toml",)),
        WorkspaceTypeRule(name="git", has_any_file=(".git",)),
        WorkspaceTypeRule(name="fallback"),
    )

    def test_first_match_wins(self) -> None:
        assert classify(PRESENT, self.RULES) == "rust"

    def test_order_matters(self) -> None:
        reordered = (self.RULES[1], self.RULES[0], self.RULES[2])
        assert classify(PRESENT, reordered) == "git"

    def test_catch_all_at_end(self) -> None:
        assert classify(frozenset({"notes.txt"}), self.RULES) == "fallback"

    def test_no_match(self) -> None:
        assert classify(frozenset({"notes.txt"}), self.RULES[:2]) is None
        assert first_match(frozenset(), self.RULES[:2]) is None

    def test_no_rules_uses_builtins(self) -> None:
        assert classify(PRESENT, None) == BUILTIN_VCS_TYPE
        assert classify(PRESENT, ()) == BUILTIN_VCS_TYPE

    def test_match_carries_rule(self) -> None:
        assert classify_match(PRESENT, self.RULES) == ("rust", self.RULES[0])
        assert classify_match(frozenset({"notes.txt"}), self.RULES[:2]) is None

    def test_builtin_match_has_no_rule(self) -> None:
        assert classify_match(PRESENT, None) == (BUILTIN_VCS_TYPE, None)


class TestClassifyBuiltin:
    @pytest.mark.parametrize("marker", [".git", ".hg", ".jj", ".svn"])
    def test_vcs_markers(self, marker: str) -> None:
        assert classify_builtin(frozenset({marker})) == BUILTIN_VCS_TYPE

    def test_local_override_file(self) -> None:
        assert classify_builtin(frozenset({".wsctl.yaml"})) == BUILTIN_LOCAL_TYPE

    def test_vcs_beats_local(self) -> None:
        assert classify_builtin(frozenset({".wsctl.yaml", ".git"})) == BUILTIN_VCS_TYPE

    def test_custom_override_filenames(self) -> None:
        present = frozenset({"layout.yaml"})
        assert classify_builtin(present) is None
        assert classify_builtin(present, override_filenames=["layout.yaml"]) == BUILTIN_LOCAL_TYPE

    def test_plain_directory(self) -> None:
        assert classify_builtin(frozenset({"src", "README.md"})) is None
