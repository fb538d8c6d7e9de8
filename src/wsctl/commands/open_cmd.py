"""Command: open a workspace in a tmux session."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wsctl.commands._base import WsCommand
from wsctl.commands._picker import pick

if TYPE_CHECKING:
    from wsctl.commands._context import AppContext
    from wsctl.domain.errors import DirectoryUnreadable
    from wsctl.domain.types import Workspace


@click.command(
    "open",
    cls=WsCommand,
    examples="""\
  wsctl open
  wsctl open -p ~/dev/wsctl
  wsctl open -p . -l python -d
  wsctl open --pick-layout
  wsctl open -p ~/dev/api -n api-review""",
)
@click.option(
    "-p",
    "--path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Open this directory instead of picking from the search results.",
)
@click.option("-l", "--layout", default=None, help="Layout to apply (overrides local and type).")
@click.option("--pick-layout", is_flag=True, help="Choose the layout interactively.")
@click.option("-n", "--name", "session_name", default=None, help="Force the session name.")
@click.option("-d", "--dont-attach", is_flag=True, help="Create the session but do not attach.")
@click.pass_obj
def open_cmd(
    app: AppContext,
    path: Path | None,
    layout: str | None,
    pick_layout: bool,
    session_name: str | None,
    dont_attach: bool,
) -> None:
    """Open a workspace, creating its session if needed."""
    from wsctl.services.workspace import WorkspaceService

    if layout and pick_layout:
        raise click.UsageError("--layout and --pick-layout are mutually exclusive.")

    svc = WorkspaceService(app.catalog, app.dispatcher)

    target: Workspace | Path
    unreadable: list[DirectoryUnreadable] = []
    if path is not None:
        target = path.expanduser().resolve()
    else:
        target = pick(
            svc.iter_workspaces(unreadable=unreadable),
            interactive=app.interactive,
            what="workspace",
            label=_workspace_label,
        )

    if pick_layout:
        layout = pick(
            sorted(app.catalog.layouts),
            interactive=app.interactive,
            what="layout",
        )

    result = svc.open(target, layout=layout, session_name=session_name)
    if unreadable:
        result = result.model_copy(
            update={
                "warnings": [
                    *result.warnings,
                    *(f"Skipped unreadable directory {u.path}: {u.reason}" for u in unreadable),
                ]
            }
        )
    app.emit(result)

    if not dont_attach:
        app.dispatcher.attach(result.data["session"])


def _workspace_label(workspace: Workspace) -> str:
    if workspace.type_name:
        return f"{workspace.path}  [{workspace.type_name}]"
    return str(workspace.path)
