"""Rich Console factory and theme for whencal output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WHEN_THEME = Theme(
    {
        "when.ok": "bold green",
        "when.error": "bold red",
        "when.warning": "bold yellow",
        "when.op": "bold cyan",
        "when.key": "dim",
        "when.header": "bold",
        "when.date": "cyan",
        "when.label.today": "bold green",
        "when.label.yesterday": "dim",
        "when.label.tomorrow": "yellow",
        "when.line": "dim",
    }
)

_LABEL_STYLES: dict[str, str] = {
    "today": "when.label.today",
    "yesterday": "when.label.yesterday",
    "tomorrow": "when.label.tomorrow",
}


def create_console() -> Console:
    """Create a 120-column Console that renders to a StringIO buffer."""
    return Console(file=StringIO(), theme=WHEN_THEME, highlight=False, width=120)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_label(label: str) -> str:
    """Return the Rich style name for a report day label."""
    return _LABEL_STYLES.get(label, "")
