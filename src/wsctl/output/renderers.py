"""Rich renderers for ServiceResult, one per operation.

:func:`render_result` looks up ``result.op`` in ``_OP_RENDERERS``; ops
without an entry get a plain key/value listing. Everything is drawn on a
StringIO-backed console and returned as text, which carries no ANSI codes
when the output is not a terminal (pipes, CliRunner).
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from wsctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from wsctl.services.result import ServiceResult

Renderer = Callable[..., None]

# Keys tried, in order, when --quiet reduces a result to one line.
_QUIET_ITEM_KEYS = ("name", "path")
_QUIET_RESULT_KEYS = ("session", "path", "name")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a human reader."""
    console = create_console()
    if not result.ok:
        _render_error(result, console, verbose=verbose)
    else:
        _OP_RENDERERS.get(result.op, _render_generic)(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Lists print one name (layouts, sessions) or path (workspaces) per
    line; single results print the session name or path they produced.
    """
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {message}"

    items = result.data.get("items")
    if isinstance(items, list):
        lines = (_first_present(item, _QUIET_ITEM_KEYS) for item in items)
        return "\n".join(line for line in lines if line)
    return _first_present(result.data, _QUIET_RESULT_KEYS) or f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _first_present(data: Any, keys: tuple[str, ...]) -> str:
    if not isinstance(data, dict):
        return ""
    for key in keys:
        if data.get(key):
            return str(data[key])
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "ws.ok"), (f"  {result.op}", "ws.op")))


_FIELD_STYLES = {
    "path": "ws.path",
    "file": "ws.path",
    "layout_file": "ws.path",
    "type": "ws.type",
    "session": "ws.session",
    "target": "ws.session",
    "layout": "ws.layout",
}


def _field(console: Console, key: str, value: Any) -> None:
    """One indented ``key: value`` line; None shows as ``-``."""
    shown = "-" if value is None else str(value)
    console.print(Text.assemble((f"  {key}: ", "ws.key"), (shown, _FIELD_STYLES.get(key, ""))))


def _commands(console: Console, commands: list[str]) -> None:
    if not commands:
        return
    console.print(Text("  commands:", style="ws.key"))
    for i, command in enumerate(commands, 1):
        console.print(Text.assemble((f"    {i:>2}. ", "ws.index"), command))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Verbose-only block: telemetry as a span tree, anything else as fields."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            tree = Tree(_span_label(value), guide_style="dim")
            _add_spans(tree, value.get("children", []))
            console.print(tree)
        else:
            console.print(Text(f"    {key}: {value}"))


def _span_label(span: dict[str, Any]) -> Text:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    label = Text.assemble((f"{duration:>8.2f}ms", style), f"  {span.get('name', '?')}")
    annotations = span.get("annotations") or {}
    if annotations:
        label.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    return label


def _add_spans(parent: Tree, spans: list[dict[str, Any]]) -> None:
    for span in spans:
        _add_spans(parent.add(_span_label(span)), span.get("children", []))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "ws.error"), (f"  {result.op}", "ws.op"), ": ", msg))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(Text(f"    {key}: {value}"))


# ── Workspace renderers ───────────────────────────────────────────────


def _render_search(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render search results as a table of workspaces."""
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="ws.index", justify="right")
    table.add_column("Path", style="ws.path")
    table.add_column("Type", style="ws.type")
    table.add_column("Layout", style="ws.layout")
    for i, item in enumerate(items):
        table.add_row(
            str(i),
            str(item.get("path", "")),
            item.get("type") or "-",
            item.get("layout") or "-",
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} workspaces")
    if verbose:
        _render_meta(console, result)


def _render_open(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render an opened (or reused) session."""
    _status_line(console, result)
    d = result.data
    _field(console, "session", d.get("session"))
    _field(console, "path", d.get("path"))
    _field(console, "type", d.get("type"))
    if d.get("created"):
        _field(console, "layout", d.get("layout"))
        if d.get("layout_source"):
            _field(console, "layout_source", d["layout_source"])
        _commands(console, d.get("commands", []))
    else:
        console.print(Text("  (existing session, no commands sent)", style="dim"))
    if verbose:
        _render_meta(console, result)


def _render_inspect(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the classification of a single directory as a panel."""
    d = result.data
    lines = [
        f"type: {d.get('type') or '-'}",
        f"session: {d.get('session')}",
        f"layout: {d.get('layout') or '-'}",
    ]
    if d.get("layout_source"):
        lines.append(f"layout source: {d['layout_source']}")
    if d.get("layout_file"):
        lines.append(f"layout file: {d['layout_file']}")
    commands = d.get("commands", [])
    if commands:
        lines.append("")
        lines.extend(f"{i:>2}. {c}" for i, c in enumerate(commands, 1))
    console.print(Panel(Text("\n".join(lines)), title=str(d.get("path", "?")), expand=False))
    if verbose:
        _render_meta(console, result)


# ── Layout renderers ──────────────────────────────────────────────────


def _render_layout_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="ws.layout", no_wrap=True)
    table.add_column("Inherits")
    table.add_column("Own", justify="right")
    table.add_column("Total", justify="right")
    for item in items:
        total = item.get("total_commands")
        table.add_row(
            str(item.get("name", "")),
            ", ".join(item.get("inherits", [])) or "-",
            str(item.get("own_commands", 0)),
            "invalid" if total is None else str(total),
        )
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} layouts")


def _render_layout_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "layout", d.get("name"))
    if d.get("file"):
        _field(console, "file", d["file"])
    if d.get("inherits"):
        _field(console, "inherits", ", ".join(d["inherits"]))
    _commands(console, d.get("commands", []))
    if verbose:
        _render_meta(console, result)


# ── Session renderers ─────────────────────────────────────────────────


def _render_sessions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Session", style="ws.session", no_wrap=True)
    table.add_column("Path", style="ws.path")
    for item in items:
        table.add_row(str(item.get("name", "")), str(item.get("path", "")))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} sessions")


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render session group / attach / config init results."""
    _status_line(console, result)
    for key in ("session", "target", "path"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


# ── Config renderers ──────────────────────────────────────────────────


def _render_json_block(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render schema / effective config as highlighted JSON."""
    payload = result.data.get("schema", result.data.get("config", result.data))
    if result.data.get("file"):
        console.print(Text(f"# {result.data['file']}", style="dim"))
    console.print(Syntax(json.dumps(payload, indent=2), "json", background_color="default"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Ops without a dedicated renderer; nested values print as compact JSON."""
    _status_line(console, result)
    for key, value in result.data.items():
        nested = isinstance(value, (dict, list))
        _field(console, key, json.dumps(value, separators=(",", ":")) if nested else value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    # Workspaces
    "search": _render_search,
    "open": _render_open,
    "inspect": _render_inspect,
    # Layouts
    "layout_list": _render_layout_list,
    "layout_show": _render_layout_show,
    # Sessions
    "sessions": _render_sessions,
    "session_attach": _render_mutation,
    "session_group": _render_mutation,
    # Config
    "config_init": _render_mutation,
    "config_schema": _render_json_block,
    "config_show": _render_json_block,
}
