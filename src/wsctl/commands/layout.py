"""Command group: layout list and show."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wsctl.commands._base import WsGroup

if TYPE_CHECKING:
    from wsctl.commands._context import AppContext


@click.group(
    cls=WsGroup,
    examples="""\
  wsctl layout list
  wsctl layout show python
  wsctl layout show --path .""",
)
def layout() -> None:
    """Inspect configured layouts."""


@layout.command("list", examples="  wsctl layout list\n  wsctl -q layout list")
@click.pass_obj
def layout_list(app: AppContext) -> None:
    """List layouts with their parents and command counts."""
    from wsctl.services.layout import LayoutService

    app.emit(LayoutService(app.catalog).list_layouts())


@layout.command(
    "show",
    examples="""\
  wsctl layout show python
  wsctl layout show --path ~/dev/api""",
)
@click.argument("name", required=False)
@click.option(
    "--path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Show the local layout file that applies to this directory.",
)
@click.pass_obj
def layout_show(app: AppContext, name: str | None, path: Path | None) -> None:
    """Show the fully resolved command list of layout NAME."""
    from wsctl.services.layout import LayoutService

    if name is None and path is None:
        raise click.UsageError("Give a layout NAME or --path.")
    app.emit(
        LayoutService(app.catalog).show(
            name, path=path.expanduser().resolve() if path else None
        )
    )
