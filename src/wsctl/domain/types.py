"""Workspace and layout value types.

Definitions are loaded once per invocation and never mutated afterwards,
so every type here is a frozen dataclass holding tuples rather than lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Built-in workspace types used when no workspace definitions are configured.
BUILTIN_VCS_TYPE = "vcs"
BUILTIN_LOCAL_TYPE = "local"

# Directory entries that mark a version-control repository root.
VCS_MARKERS: frozenset[str] = frozenset({".git", ".hg", ".jj", ".svn"})

DEFAULT_OVERRIDE_FILENAMES: tuple[str, ...] = (".wsctl.yaml", ".wsctl.yml")


@dataclass(frozen=True)
class WorkspaceTypeRule:
    """A named predicate over the filenames directly inside a directory.

    Empty condition tuples are treated as unset. A rule with no conditions
    matches every directory.
    """

    name: str
    has_any_file: tuple[str, ...] = ()
    has_all_files: tuple[str, ...] = ()
    missing_any_file: tuple[str, ...] = ()
    missing_all_files: tuple[str, ...] = ()
    default_layout: str | None = None


@dataclass(frozen=True)
class Workspace:
    """A directory identified as a project root."""

    path: Path
    type_name: str | None
    chosen_layout_name: str | None = None

    def as_dict(self) -> dict[str, str | None]:
        return {
            "path": str(self.path),
            "type": self.type_name,
            "layout": self.chosen_layout_name,
        }


@dataclass(frozen=True)
class LayoutDef:
    """A named, inheritable list of commands sent to a new session."""

    name: str
    inherits: tuple[str, ...] = ()
    commands: tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedLayout:
    """A layout with its inheritance chain flattened into one command list."""

    name: str
    commands: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.commands)
