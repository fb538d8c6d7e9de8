"""Local layout override discovery.

Walks up from a workspace directory looking for ``.wsctl.yaml`` (or any
configured filename), the same way git finds ``.git/``. The file closest
to the starting directory wins. Its ``layout`` takes priority over the
workspace type's default layout, but not over a layout the user asked for
explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from wsctl.config.discovery import read_yaml
from wsctl.config.models import LocalLayoutFile
from wsctl.domain.errors import ConfigError
from wsctl.domain.types import DEFAULT_OVERRIDE_FILENAMES, LayoutDef

logger = logging.getLogger(__name__)


def find_local_override_file(
    start_dir: Path,
    filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
) -> Path | None:
    """Walk up from *start_dir* and return the first override file found.

    Within one directory, *filenames* are tried in order. Returns None once
    the filesystem root has been checked without a match.
    """
    names = tuple(filenames)
    current = start_dir.expanduser().absolute()
    while True:
        for name in names:
            candidate = current / name
            if candidate.is_file():
                return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_local_override(path: Path) -> LayoutDef:
    """Parse an override file into a :class:`LayoutDef`.

    Raises ConfigError when the file is not valid YAML or does not hold a
    ``layout`` mapping.
    """
    data = read_yaml(path)
    try:
        parsed = LocalLayoutFile.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(path, str(exc)) from exc
    return parsed.layout.to_layout()


def find_local_override(
    start_dir: Path,
    filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
) -> tuple[Path, LayoutDef] | None:
    """Return the closest override file above *start_dir* and its layout, or None."""
    path = find_local_override_file(start_dir, filenames)
    if path is None:
        return None
    logger.debug("Using local layout override %s", path)
    return path, load_local_override(path)
