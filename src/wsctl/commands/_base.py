"""Click base classes that add an ``--examples`` flag.

Commands declare ``examples="..."``; ``--examples`` prints them and exits,
so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.echo(f"Examples for '{ctx.command_path}':\n\n{examples}")
    ctx.exit(0)


class _ExamplesMixin:
    """Stores ``examples`` and registers the eager ``--examples`` option."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    is_eager=True,
                    expose_value=False,
                    callback=_print_examples,
                    help="Show usage examples.",
                )
            )


class WsCommand(_ExamplesMixin, click.Command):
    """Click Command with ``--examples``."""


class WsGroup(_ExamplesMixin, click.Group):
    """Click Group with ``--examples``.

    Subcommands are created as :class:`WsCommand`, so they take
    ``examples=`` without an explicit ``cls=``.
    """

    command_class = WsCommand
