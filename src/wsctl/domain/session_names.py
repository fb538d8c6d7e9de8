"""Session name generation.

A session is named after the last N components of its workspace path
(``dev/twm`` for N=2). On collision one more ancestor is pulled in until
the name is unique; once the path is exhausted the absolute path itself is
used. Sanitizing can fold two absolute paths together (``/x/a.b`` and
``/x/a_b``), so a taken absolute path gets a ``-N`` suffix.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection, Iterable
from pathlib import PurePath

SEPARATOR = "/"

# tmux treats "." and ":" as target separators.
_DISALLOWED_CHARS = re.compile(r"[.:]")


def sanitize_session_name(name: str) -> str:
    """Replace characters tmux does not allow in session names with ``_``."""
    return _DISALLOWED_CHARS.sub("_", name)


def path_components(path: str | PurePath) -> list[str]:
    """Split *path* into its named components, dropping the root anchor."""
    pure = PurePath(path)
    parts = list(pure.parts)
    if pure.anchor and parts and parts[0] == pure.anchor:
        parts = parts[1:]
    return [p for p in parts if p not in ("", ".")]


def candidate_names(path: str | PurePath, default_components: int) -> Iterable[str]:
    """Yield names of increasing length for *path*, ending with the full path."""
    parts = path_components(path)
    start = max(1, default_components)
    for count in range(start, len(parts) + 1):
        yield SEPARATOR.join(parts[-count:])
    yield str(path)


def name_session(
    path: str | PurePath,
    default_components: int,
    used_names: Collection[str],
    *,
    sanitize: Callable[[str], str] | None = None,
) -> str:
    """Derive a session name for *path* that is not in *used_names*.

    Examples:
        >>> name_session("/home/vinny/dev/rust/twm", 2, set())
        'rust/twm'
        >>> name_session("/home/vinny/dev/rust/twm", 2, {"rust/twm"})
        'dev/rust/twm'
    """
    name = str(path)
    for raw in candidate_names(path, default_components):
        name = sanitize(raw) if sanitize else raw
        if name not in used_names:
            return name
    return group_session_name(name, used_names)


def group_session_name(target: str, used_names: Collection[str]) -> str:
    """Name a session grouped with *target*: ``target-1``, ``target-2``, ..."""
    index = 1
    while f"{target}-{index}" in used_names:
        index += 1
    return f"{target}-{index}"



class SessionNamer:
    """Names several workspaces in one pass without handing out a name twice.

    Each generated name joins the used set, so two ``twm`` checkouts named
    in the same batch come out as ``twm`` and ``rust/twm``.
    """

    def __init__(
        self,
        used_names: Iterable[str] = (),
        default_components: int = 1,
        sanitize: Callable[[str], str] | None = None,
    ) -> None:
        self._used: set[str] = set(used_names)
        self.default_components = default_components
        self._sanitize = sanitize

    @property
    def used_names(self) -> frozenset[str]:
        return frozenset(self._used)

    def name(self, path: str | PurePath) -> str:
        """Name *path* and reserve the result."""
        result = name_session(path, self.default_components, self._used, sanitize=self._sanitize)
        self._used.add(result)
        return result
