"""Subcommand modules for wsctl.

Provides register_commands() which uses deferred imports to keep
``wsctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group."""
    # --- Groups ---
    from wsctl.commands.config_cmd import config_cmd
    from wsctl.commands.layout import layout
    from wsctl.commands.session import session

    cli.add_command(layout)
    cli.add_command(session)
    cli.add_command(config_cmd)

    # --- Standalone commands ---
    from wsctl.commands.inspect import inspect
    from wsctl.commands.list_cmd import list_cmd
    from wsctl.commands.open_cmd import open_cmd

    cli.add_command(open_cmd)
    cli.add_command(list_cmd)
    cli.add_command(inspect)
