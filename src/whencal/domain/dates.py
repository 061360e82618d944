"""Calendar-date helpers on top of :class:`datetime.date`.

Dates are local civil dates with no time component. ``datetime.date`` already
provides the invariants we need (always valid, immutable, totally ordered),
so this module only adds the calendar arithmetic the expression matcher
relies on and a literal parser for ``"<year> <month> <day>"`` strings.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta

from whencal.domain.months import resolve_month


def add_days(value: date, days: int) -> date:
    """Return *value* shifted by *days* (negative moves backwards)."""
    return value + timedelta(days=days)


def weekday_number(value: date) -> int:
    """Monday-based weekday number, 1=Monday .. 7=Sunday."""
    return value.isoweekday()


def day_of_year(value: date) -> int:
    """1-based ordinal day within the year."""
    return value.timetuple().tm_yday


def week_of_month(value: date) -> int:
    """1 for days 1-7, 2 for days 8-14, and so on."""
    return (value.day - 1) // 7 + 1


def date_range(first: date, last: date) -> Iterator[date]:
    """Yield every date of the closed interval ``[first, last]`` in order.

    Yields nothing when *first* is after *last*.
    """
    for ordinal in range(first.toordinal(), last.toordinal() + 1):
        yield date.fromordinal(ordinal)


def parse_unsigned(token: str) -> int | None:
    """Parse a non-negative decimal integer literal; None for anything else."""
    if token.isascii() and token.isdigit():
        return int(token)
    return None


def parse_date(text: str) -> date | None:
    """Parse a literal date such as ``"2021 Jan 9"`` or ``"2021 1 9"``.

    Returns None when the text is not three tokens, a token does not parse,
    or the triple is not a valid civil date.
    """
    tokens = text.split()
    if len(tokens) != 3:
        return None
    year = parse_unsigned(tokens[0])
    month = resolve_month(tokens[1])
    day = parse_unsigned(tokens[2])
    if year is None or month is None or day is None:
        return None
    try:
        return date(year, month, day)
    except (ValueError, OverflowError):
        return None
