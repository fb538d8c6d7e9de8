"""Theme and buffer-backed consoles for wsctl output.

Renderers draw on a Console whose file is a StringIO, then hand the text
back to the caller, so every output path ends in ``click.echo``. Rich
drops color codes on its own when the real stdout is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

# Wide enough for a workspace path, its type and layout on one table row.
DEFAULT_WIDTH = 120

WS_THEME = Theme(
    {
        "ws.ok": "bold green",
        "ws.error": "bold red",
        "ws.op": "bold cyan",
        "ws.key": "dim",
        "ws.index": "dim",
        "ws.path": "blue",
        "ws.type": "magenta",
        "ws.layout": "cyan",
        "ws.session": "bold green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """A themed Console that writes into a fresh StringIO."""
    return Console(
        file=StringIO(),
        theme=WS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or DEFAULT_WIDTH,
    )


def get_output(console: Console) -> str:
    """Everything written to a console made by :func:`create_console`."""
    buffer = console.file
    assert isinstance(buffer, StringIO)
    return buffer.getvalue()
