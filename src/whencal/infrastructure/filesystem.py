"""Filesystem operations for the calendar and preferences files.

Pure line parsing lives in :mod:`whencal.domain.calendar` and
:mod:`whencal.config.preferences` (correct dependency direction:
infrastructure -> domain). This module handles actual file I/O.
"""

from __future__ import annotations

from pathlib import Path

from whencal.domain.calendar import CalendarEntry, is_comment, parse_calendar_line

APP_DIRNAME = ".whencal"
PREFERENCES_FILENAME = "preferences"
CALENDAR_FILENAME = "calendar"


def app_dir(home: Path | None = None) -> Path:
    """``~/.whencal`` (or the same directory under *home*)."""
    return (home or Path.home()) / APP_DIRNAME


def read_calendar(path: Path) -> tuple[list[CalendarEntry], list[tuple[int, str]]]:
    """Read a calendar file.

    Returns ``(entries, bad_lines)`` where *bad_lines* holds the 1-based
    number and text of every non-comment line without a comma.

    Raises:
        OSError: If the file cannot be read.
    """
    entries: list[CalendarEntry] = []
    bad_lines: list[tuple[int, str]] = []
    text = path.read_text(encoding="utf-8")
    for number, line in enumerate(text.splitlines(), start=1):
        if is_comment(line):
            continue
        parsed = parse_calendar_line(line)
        if parsed is None:
            bad_lines.append((number, line))
            continue
        expression, description = parsed
        entries.append(CalendarEntry(line=number, expression=expression, description=description))
    return entries, bad_lines


def write_preferences(path: Path, values: dict[str, str]) -> None:
    """Write ``key = value`` lines, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [f"{key} = {value}" for key, value in values.items()]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def touch_calendar(path: Path) -> bool:
    """Create an empty calendar file. Returns False if it already existed."""
    if path.exists():
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return True
