"""LayoutService — list and preview layouts."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from wsctl.domain.errors import WsctlError
from wsctl.services.base import BaseService
from wsctl.services.result import ServiceResult
from wsctl.services.telemetry import trace_span, traced


class LayoutService(BaseService):
    """Read-only operations over the configured layouts."""

    @traced
    def list_layouts(self) -> ServiceResult:
        """Every global layout with its direct parents and own command count.

        Layouts that fail to resolve are still listed; the error is
        reported as a warning so one bad definition does not hide the rest.
        """
        op = "layout_list"
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for layout in self._catalog.layouts.values():
            item: dict[str, Any] = {
                "name": layout.name,
                "inherits": list(layout.inherits),
                "own_commands": len(layout.commands),
            }
            try:
                item["total_commands"] = len(self._catalog.resolve(layout.name))
            except WsctlError as exc:
                item["total_commands"] = None
                warnings.append(exc.message)
            items.append(item)
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items)},
            warnings=warnings,
        )

    @traced
    def show(self, name: str | None = None, *, path: Path | None = None) -> ServiceResult:
        """Resolve one layout into its flattened command list.

        With *path* and no *name*, shows the local override layout that
        applies to that directory.
        """
        op = "layout_show"
        origin: str | None = None
        try:
            with trace_span("resolve"):
                if name is None and path is not None:
                    override = self._catalog.find_override(path)
                    if override is None:
                        return ServiceResult.failure(
                            op,
                            "NO_LOCAL_LAYOUT",
                            f"No local layout file found above {path}",
                            detail={"path": str(path)},
                        )
                    override_file, local = override
                    inherits = list(local.inherits)
                    resolved = self._catalog.resolve_definition(local)
                    origin = str(override_file)
                elif name is not None:
                    resolved = self._catalog.resolve(name)
                    inherits = list(self._catalog.layouts[name].inherits)
                else:
                    return ServiceResult.failure(
                        op, "MISSING_ARGUMENT", "Give a layout name or --path"
                    )
        except WsctlError as exc:
            return ServiceResult.from_error(op, exc)

        data: dict[str, Any] = {
            "name": resolved.name,
            "inherits": inherits,
            "commands": list(resolved.commands),
        }
        if origin:
            data["file"] = origin
        return ServiceResult(ok=True, op=op, data=data)
