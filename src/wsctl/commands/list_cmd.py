"""Command: search the configured paths and list workspaces."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wsctl.commands._base import WsCommand

if TYPE_CHECKING:
    from wsctl.commands._context import AppContext


@click.command(
    "list",
    cls=WsCommand,
    examples="""\
  wsctl list
  wsctl list --limit 20
  wsctl list ~/dev ~/work
  wsctl -q list | fzf""",
)
@click.argument(
    "roots",
    nargs=-1,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Stop after N workspaces.")
@click.pass_obj
def list_cmd(app: AppContext, roots: tuple[Path, ...], limit: int | None) -> None:
    """List workspaces under ROOTS (default: configured search paths)."""
    from wsctl.services.workspace import WorkspaceService

    svc = WorkspaceService(app.catalog)
    app.emit(svc.search([r.expanduser() for r in roots] or None, limit=limit))
