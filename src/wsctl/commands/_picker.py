"""Interactive selection of workspaces, layouts and sessions.

The selector consumes a (possibly lazy) sequence of candidates. Entries
are printed to stderr as a numbered Rich table; the user answers with an
index, or with text that narrows the list to entries containing it.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable
from typing import Protocol, TypeVar

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from wsctl.output.console import WS_THEME

T = TypeVar("T")

# Upper bound on candidates pulled from a lazy search before prompting.
DEFAULT_PICK_LIMIT = 500


class Selector(Protocol):
    def select(
        self,
        candidates: Iterable[T],
        *,
        label: Callable[[T], str] = str,
        prompt: str = "Select",
    ) -> T | None: ...


class PromptSelector:
    """Numbered-list selector built on ``click.prompt``.

    An empty answer cancels and returns None.
    """

    def __init__(self, *, limit: int = DEFAULT_PICK_LIMIT, console: Console | None = None) -> None:
        self.limit = limit
        self.console = console or Console(stderr=True, theme=WS_THEME, highlight=False)

    def select(
        self,
        candidates: Iterable[T],
        *,
        label: Callable[[T], str] = str,
        prompt: str = "Select",
    ) -> T | None:
        entries = [(label(c), c) for c in itertools.islice(candidates, self.limit)]
        if not entries:
            return None

        shown = entries
        while True:
            self._show([text for text, _ in shown])
            answer = click.prompt(
                f"{prompt} (number or filter, empty to cancel)",
                default="",
                show_default=False,
                err=True,
            ).strip()
            if not answer:
                return None
            if answer.isdigit():
                index = int(answer)
                if 0 <= index < len(shown):
                    return shown[index][1]
                click.echo(f"No entry {index}.", err=True)
                continue

            needle = answer.lower()
            narrowed = [e for e in entries if needle in e[0].lower()]
            if len(narrowed) == 1:
                return narrowed[0][1]
            if not narrowed:
                click.echo(f"Nothing matches {answer!r}.", err=True)
                continue
            shown = narrowed

    def _show(self, labels: list[str]) -> None:
        table = Table(show_header=False, box=None, pad_edge=False)
        table.add_column(style="ws.index", justify="right")
        table.add_column()
        for i, text in enumerate(labels):
            table.add_row(str(i), Text(text))
        self.console.print(table)


def pick(
    candidates: Iterable[T],
    *,
    interactive: bool,
    what: str,
    label: Callable[[T], str] = str,
    selector: Selector | None = None,
) -> T:
    """Select one candidate or fail with a Click error.

    Raises:
        click.UsageError: Prompting is disabled.
        click.ClickException: Nothing to choose from, or the user cancelled.
    """
    if not interactive:
        raise click.UsageError(f"No {what} given and prompting is disabled (--no-interact).")
    choice = (selector or PromptSelector()).select(candidates, label=label, prompt=f"Pick {what}")
    if choice is None:
        raise click.ClickException(f"No {what} selected.")
    return choice
