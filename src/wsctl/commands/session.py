"""Command group: running sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from wsctl.commands._base import WsGroup
from wsctl.commands._picker import pick

if TYPE_CHECKING:
    from wsctl.commands._context import AppContext


@click.group(
    cls=WsGroup,
    examples="""\
  wsctl session list
  wsctl session attach api
  wsctl session group api -d""",
)
def session() -> None:
    """List, attach to and group tmux sessions."""


@session.command("list", examples="  wsctl session list\n  wsctl -q session list")
@click.pass_obj
def session_list(app: AppContext) -> None:
    """List running sessions and their start directories."""
    from wsctl.services.session import SessionService

    app.emit(SessionService(app.catalog, app.dispatcher).list_sessions())


@session.command("attach", examples="  wsctl session attach\n  wsctl session attach api")
@click.argument("name", required=False)
@click.pass_obj
def session_attach(app: AppContext, name: str | None) -> None:
    """Attach to session NAME (picked interactively when omitted)."""
    from wsctl.services.session import SessionService

    svc = SessionService(app.catalog, app.dispatcher)
    if name is None:
        name = pick(svc.session_names(), interactive=app.interactive, what="session")
    result = svc.check_exists(name)
    app.emit(result)
    svc.attach(name)


@session.command(
    "group",
    examples="""\
  wsctl session group
  wsctl session group api
  wsctl session group api --dont-attach""",
)
@click.argument("target", required=False)
@click.option("-d", "--dont-attach", is_flag=True, help="Create the session but do not attach.")
@click.pass_obj
def session_group(app: AppContext, target: str | None, dont_attach: bool) -> None:
    """Create a session sharing windows with TARGET, named TARGET-N."""
    from wsctl.services.session import SessionService

    svc = SessionService(app.catalog, app.dispatcher)
    if target is None:
        target = pick(svc.session_names(), interactive=app.interactive, what="session")
    result = svc.group(target)
    app.emit(result)
    if not dont_attach:
        svc.attach(result.data["session"])
