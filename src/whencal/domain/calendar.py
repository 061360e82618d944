"""Calendar file lines — splitting ``expression,description`` records."""

from __future__ import annotations

from dataclasses import dataclass

COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class CalendarEntry:
    """One calendar line split into expression and description."""

    line: int
    expression: str
    description: str


def is_comment(line: str) -> bool:
    """Blank lines and lines starting with ``#`` carry no entry."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


def parse_calendar_line(line: str) -> tuple[str, str] | None:
    """Split *line* at its first comma into ``(expression, description)``.

    The description may itself contain commas.

    Examples:
        >>> parse_calendar_line("* Dec 25,Christmas, again")
        ('* Dec 25', 'Christmas, again')
        >>> parse_calendar_line("no comma") is None
        True
    """
    expression, sep, description = line.partition(",")
    if not sep or not expression:
        return None
    return expression, description
