"""Command: show how a single directory would be opened."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wsctl.commands._base import WsCommand

if TYPE_CHECKING:
    from wsctl.commands._context import AppContext


@click.command(
    cls=WsCommand,
    examples="""\
  wsctl inspect .
  wsctl inspect ~/dev/api -l python
  wsctl --json inspect ~/dev/api""",
)
@click.argument(
    "path",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("-l", "--layout", default=None, help="Preview with this layout instead.")
@click.pass_obj
def inspect(app: AppContext, path: Path, layout: str | None) -> None:
    """Classify PATH and show its session name, layout and commands."""
    from wsctl.services.workspace import WorkspaceService

    app.emit(WorkspaceService(app.catalog).inspect(path.expanduser().resolve(), layout=layout))
