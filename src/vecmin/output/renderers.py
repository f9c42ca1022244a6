"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Every successful op has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from vecmin.domain.optional import NOTHING_LABEL
from vecmin.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from vecmin.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if not result.ok:
        _render_error(result, console, verbose=verbose)
    else:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Minimum operations print the bare value (or ``<nothing>``).
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    minimum = result.data["minimum"]
    return NOTHING_LABEL if minimum is None else str(minimum)


# ── Helpers ───────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="vecmin.error")
    op = Text(f"  {result.op}", style="vecmin.op")
    console.print(label, op, Text(" — "), Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Minimum renderers ─────────────────────────────────────────────────


def _render_minimum(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """The display line; verbose adds the values and any skipped lines."""
    style = "vecmin.nothing" if result.data.get("minimum") is None else "vecmin.minimum"
    console.print(Text(result.data["display"], style=style))

    if not verbose:
        return

    values = result.data.get("values", [])
    if values:
        table = Table(title=f"{len(values)} value(s)", show_edge=False, title_justify="left")
        table.add_column("#", justify="right", style="dim")
        table.add_column("value", justify="right")
        for i, value in enumerate(values, start=1):
            table.add_row(str(i), str(value))
        console.print(table)

    skipped = result.data.get("skipped", [])
    if skipped:
        title = f"{len(skipped)} skipped line(s)"
        table = Table(title=title, show_edge=False, title_justify="left")
        table.add_column("line", justify="right", style="dim")
        table.add_column("text", style="vecmin.skipped")
        table.add_column("reason")
        for entry in skipped:
            table.add_row(str(entry["line_no"]), Text(repr(entry["text"])), entry["reason"])
        console.print(table)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "sample_min": _render_minimum,
    "read_min": _render_minimum,
}
