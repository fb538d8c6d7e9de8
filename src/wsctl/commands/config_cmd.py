"""Command group: config init, schema and show."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from wsctl.commands._base import WsGroup

if TYPE_CHECKING:
    from wsctl.commands._context import AppContext


@click.group(
    "config",
    cls=WsGroup,
    examples="""\
  wsctl config init
  wsctl config init ./dotfiles --force
  wsctl config schema > wsctl.schema.json
  wsctl config schema --local
  wsctl config show""",
)
def config_cmd() -> None:
    """Create and inspect the wsctl configuration."""


@config_cmd.command("init", examples="  wsctl config init\n  wsctl config init ./dotfiles")
@click.argument(
    "directory",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option("--force", is_flag=True, help="Overwrite an existing wsctl.yaml.")
@click.pass_obj
def config_init(app: AppContext, directory: Path | None, force: bool) -> None:
    """Write a commented default wsctl.yaml (default: the user config dir)."""
    from wsctl.services.config import ConfigService

    app.emit(
        ConfigService(app.settings).init(
            directory.expanduser() if directory else None, force=force
        )
    )


@config_cmd.command("schema", examples="  wsctl config schema\n  wsctl config schema --local")
@click.option("--local", is_flag=True, help="Schema of a local layout file instead.")
@click.pass_obj
def config_schema(app: AppContext, local: bool) -> None:
    """Print the JSON schema of wsctl.yaml."""
    from wsctl.services.config import ConfigService

    app.emit(ConfigService(app.settings).schema(local=local))


@config_cmd.command("show", examples="  wsctl config show\n  wsctl --json config show")
@click.pass_obj
def config_show(app: AppContext) -> None:
    """Print the effective configuration."""
    from wsctl.services.config import ConfigService

    app.emit(ConfigService(app.settings).show())
