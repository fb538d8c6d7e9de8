"""Workspace search — depth-bounded directory walk with pruning.

Each root is walked depth-first in lexicographic order, root first (depth
0). A directory is classified from its immediate filenames; matches are
yielded as :class:`Workspace` records as soon as they are found, so a
caller can stop iterating at any point.

Pruning rules:
- a subdirectory whose basename is excluded is never visited,
- directories deeper than ``max_depth`` are never visited,
- symlinked subdirectories are skipped unless ``follow_links``,
- a canonical path is visited at most once per search,
- a matched workspace is not searched further unless ``prune_matched``
  is turned off.

Unreadable directories are reported through ``on_error`` and skipped.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Collection, Iterable, Iterator, Sequence
from pathlib import Path

from wsctl.domain.errors import DirectoryUnreadable
from wsctl.domain.matching import classify_match
from wsctl.domain.types import DEFAULT_OVERRIDE_FILENAMES, Workspace, WorkspaceTypeRule
from wsctl.infrastructure.filesystem import DirEntry, filenames_in, list_entries

logger = logging.getLogger(__name__)

OnError = Callable[[DirectoryUnreadable], None]


def _log_unreadable(error: DirectoryUnreadable) -> None:
    logger.warning("Skipping unreadable directory %s: %s", error.path, error.reason)


def classify_names(
    path: Path,
    filenames: Collection[str],
    rules: Sequence[WorkspaceTypeRule] | None,
    *,
    override_filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
) -> Workspace | None:
    """Build a Workspace for *path* if its filenames match a workspace type.

    The matched rule's ``default_layout`` becomes the initial layout choice.
    """
    found = classify_match(filenames, rules, override_filenames=override_filenames)
    if found is None:
        return None
    type_name, rule = found
    default_layout = rule.default_layout if rule is not None else None
    return Workspace(path=path, type_name=type_name, chosen_layout_name=default_layout)


def classify_directory(
    path: Path,
    rules: Sequence[WorkspaceTypeRule] | None,
    *,
    override_filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
) -> Workspace:
    """Classify a single directory, returning an untyped Workspace on no match.

    Used when the user names a directory explicitly: it is opened whether
    or not it looks like a workspace. Raises OSError if it cannot be listed.
    """
    path = Path(os.path.abspath(path))
    found = classify_names(path, filenames_in(path), rules, override_filenames=override_filenames)
    return found if found is not None else Workspace(path=path, type_name=None)


def search_workspaces(
    roots: Iterable[str | Path],
    *,
    rules: Sequence[WorkspaceTypeRule] | None = None,
    max_depth: int = 3,
    exclude_path_components: Collection[str] = (),
    follow_links: bool = False,
    prune_matched: bool = True,
    override_filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
    on_error: OnError | None = None,
) -> Iterator[Workspace]:
    """Lazily yield workspaces under *roots*, in root order.

    Args:
        roots: Directories to search; ``~`` is expanded.
        rules: Ordered workspace-type rules. None or empty uses the
            built-in VCS / local-override predicates.
        max_depth: Deepest level visited, counted from each root (0).
        exclude_path_components: Basenames whose subtrees are pruned.
        follow_links: Descend into symlinked directories.
        prune_matched: Stop descending once a directory matches.
        override_filenames: Local layout filenames for the built-in predicate.
        on_error: Called with a :class:`DirectoryUnreadable` for every
            directory that cannot be listed. Defaults to a logged warning.
    """
    report = on_error or _log_unreadable
    excluded = frozenset(exclude_path_components)
    override_names = tuple(override_filenames)
    visited: set[str] = set()

    for root in roots:
        root_path = Path(os.path.abspath(Path(root).expanduser()))
        logger.debug("Searching %s (max_depth=%d)", root_path, max_depth)
        stack: list[tuple[Path, int]] = [(root_path, 0)]

        while stack:
            directory, depth = stack.pop()

            canonical = os.path.realpath(directory)
            if canonical in visited:
                continue
            visited.add(canonical)

            try:
                entries = list_entries(directory)
            except OSError as exc:
                report(DirectoryUnreadable(path=directory, reason=exc.strerror or str(exc)))
                continue

            names = frozenset(e.name for e in entries)
            workspace = classify_names(
                directory, names, rules, override_filenames=override_names
            )
            if workspace is not None:
                yield workspace
                if prune_matched:
                    continue

            if depth >= max_depth:
                continue

            children = [e for e in entries if _should_descend(e, excluded, follow_links)]
            # Reversed so the lexicographically first child is popped first.
            stack.extend((child.path, depth + 1) for child in reversed(children))


def _should_descend(entry: DirEntry, excluded: frozenset[str], follow_links: bool) -> bool:
    if not entry.is_dir or entry.name in excluded:
        return False
    return follow_links or not entry.is_symlink
