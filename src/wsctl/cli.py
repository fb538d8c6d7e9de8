"""Root CLI group for wsctl with global flags and command registration."""

from __future__ import annotations

import click
from pydantic import ValidationError

from wsctl import __version__
from wsctl.commands import register_commands
from wsctl.commands._context import AppContext
from wsctl.config.settings import WsSettings
from wsctl.domain.errors import ConfigError


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="wsctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
) -> None:
    """wsctl — find project workspaces and open them in tmux sessions."""
    try:
        settings = WsSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            no_interact=no_interact,
        )
    except ConfigError as exc:
        raise click.ClickException(exc.message) from exc
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
