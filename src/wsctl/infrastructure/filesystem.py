"""Directory listing primitives.

The search engine needs one thing from the filesystem: the immediate
entries of a directory, with their kind.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DirEntry:
    """One immediate child of a directory."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool


def list_entries(directory: Path) -> list[DirEntry]:
    """Return the immediate entries of *directory* sorted by name.

    Raises OSError when the directory cannot be listed. Entries that vanish
    or cannot be stat'ed mid-listing are reported as plain files.
    """
    entries: list[DirEntry] = []
    with os.scandir(directory) as it:
        for entry in it:
            try:
                is_symlink = entry.is_symlink()
                is_dir = entry.is_dir(follow_symlinks=True)
            except OSError:
                is_symlink = False
                is_dir = False
            entries.append(
                DirEntry(
                    name=entry.name,
                    path=Path(entry.path),
                    is_dir=is_dir,
                    is_symlink=is_symlink,
                )
            )
    entries.sort(key=lambda e: e.name)
    return entries


def filenames_in(directory: Path) -> frozenset[str]:
    """Names of everything directly inside *directory*."""
    return frozenset(e.name for e in list_entries(directory))

