"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from rich.text import Text

from whencal.output.console import create_console, get_output, style_for_label

if TYPE_CHECKING:
    from rich.console import Console

    from whencal.services.result import ServiceResult

LABEL_WIDTH = 11


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, header: bool = True) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if not result.ok:
        _render_error(result, console, verbose=verbose)
    elif result.op == "report":
        _render_report(result, console, header=header)
    else:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "report":
        return "\n".join(_report_line(item) for item in result.data.get("items", []))
    if result.op == "check":
        return str(result.data.get("count", 0))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def format_date(value: date) -> str:
    """``2021 Sep  9`` — day right-aligned to two columns."""
    return f"{value.year} {value:%b} {value.day:>2}"


def _report_line(item: dict[str, Any]) -> str:
    when = format_date(date.fromisoformat(item["date"]))
    return f"{item['label']:<{LABEL_WIDTH}}{when} {item['description']}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text.assemble(("OK", "when.ok"), (f"  {result.op}", "when.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "when.key"), str(value)), soft_wrap=True)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "when.error"), (f"  {result.op}", "when.op"), " — ", msg),
        soft_wrap=True,
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Operation renderers ───────────────────────────────────────────────


def _render_report(result: ServiceResult, console: Console, *, header: bool = True) -> None:
    """Render report items, one line each, after an optional header."""
    if header:
        today = date.fromisoformat(result.data["today"])
        stamp = f"{today:%a} {format_date(today)} {result.data.get('time', '')}".rstrip()
        console.print(Text(stamp, style="when.header"))
        console.print()

    for item in result.data.get("items", []):
        label = item["label"]
        line = Text(f"{label:<{LABEL_WIDTH}}", style=style_for_label(label))
        line.append(format_date(date.fromisoformat(item["date"])), style="when.date")
        line.append(f" {item['description']}")
        console.print(line, soft_wrap=True)


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render check results, one issue per line."""
    issues = result.data.get("issues", [])
    count = result.data.get("count", len(issues))

    if count == 0:
        console.print(Text.assemble(("OK", "when.ok"), "  No issues found."))
        return

    console.print(Text(str(result.data.get("path", "")), style="when.header"))
    for issue in issues:
        line = Text("  ")
        line.append(str(issue.get("severity", "error")), style="when.error")
        line.append(f" line {issue['line']} [{issue['kind']}]: {issue['message']}")
        console.print(line, soft_wrap=True)
        if verbose and issue.get("text"):
            console.print(Text(f"    {issue['text']}", style="when.line"), soft_wrap=True)

    noun = "issue" if count == 1 else "issues"
    console.print(f"\n{count} {noun} in {result.data.get('entries', 0)} entries")


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render init results with the created paths."""
    _status_line(console, result)
    for key in ("preferences", "calendar", "editor"):
        if key in result.data:
            _field(console, key, result.data[key])
    console.print()
    console.print("You can now add items to your calendar file. Do 'whencal --help' for more.")


_OP_RENDERERS = {
    "check": _render_check,
    "init": _render_init,
}
