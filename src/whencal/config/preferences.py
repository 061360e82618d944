"""Preferences file parsing.

The preferences file holds one ``key = value`` pair per line::

    calendar = /home/me/.whencal/calendar
    editor = emacs -nw

Lines without ``=`` are ignored. Later keys override earlier ones.
"""

from __future__ import annotations

from collections.abc import Iterable


def parse_preference_line(line: str) -> tuple[str, str] | None:
    """Split a line at its first ``=`` into a trimmed ``(key, value)`` pair.

    Examples:
        >>> parse_preference_line(" abc ghi   =   def ")
        ('abc ghi', 'def')
        >>> parse_preference_line(" no equal sign") is None
        True
    """
    key, sep, value = line.partition("=")
    key = key.strip()
    value = value.strip()
    if not sep or not key or not value:
        return None
    return key, value


def parse_preferences(lines: Iterable[str]) -> dict[str, str]:
    """Collect every valid ``key = value`` line into a dict."""
    prefs: dict[str, str] = {}
    for line in lines:
        pair = parse_preference_line(line)
        if pair is not None:
            key, value = pair
            prefs[key] = value
    return prefs
