"""Exception hierarchy for wsctl.

Every error carries a stable ``code`` so the service layer can turn it into
a :class:`~wsctl.services.result.ServiceError` without string matching.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


class WsctlError(Exception):
    """Base class for all wsctl errors."""

    code = "WSCTL_ERROR"

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}


class UnknownLayoutError(WsctlError):
    """A layout name was referenced that is not defined."""

    code = "UNKNOWN_LAYOUT"

    def __init__(self, name: str, *, referenced_by: str | None = None) -> None:
        if referenced_by:
            message = f"Unknown layout {name!r} (inherited by {referenced_by!r})"
        else:
            message = f"Unknown layout {name!r}"
        super().__init__(message, detail={"layout": name, "referenced_by": referenced_by})
        self.name = name
        self.referenced_by = referenced_by


class CyclicInheritanceError(WsctlError):
    """Layout inheritance reached a layout that is already being expanded."""

    code = "CYCLIC_INHERITANCE"

    def __init__(self, cycle: list[str]) -> None:
        super().__init__(
            "Cyclic layout inheritance: " + " -> ".join(cycle),
            detail={"cycle": cycle},
        )
        self.cycle = cycle


class DuplicateNameError(WsctlError):
    """Two workspace definitions or two layouts share a name."""

    code = "DUPLICATE_NAME"

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"Duplicate {kind} name: {name!r}", detail={"kind": kind, "name": name})
        self.kind = kind
        self.name = name


class ConfigError(WsctlError):
    """A configuration or local layout file could not be read or validated."""

    code = "CONFIG_INVALID"

    def __init__(self, path: Path | None, reason: str) -> None:
        where = str(path) if path else "<defaults>"
        super().__init__(f"Invalid config {where}: {reason}", detail={"path": where})
        self.path = path


class DispatchError(WsctlError):
    """The terminal multiplexer rejected a command."""

    code = "DISPATCH_FAILED"


@dataclass(frozen=True)
class DirectoryUnreadable:
    """A directory the search could not list. Recorded, never raised."""

    path: Path
    reason: str
