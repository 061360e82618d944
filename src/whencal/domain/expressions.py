"""Date expressions — parsing and matching against calendar dates.

Two expression syntaxes are supported:

- Positional: ``"<year-or-*> <month> <day-or-*>"``, e.g. ``* Feb 14``.
  The month is digits or a month-name prefix; it has no wildcard.
- Conjunctive: ``key=value`` terms joined by ``&``, e.g. ``m=jan & w=1 & a=3``.

An expression containing neither ``=`` nor ``&`` is positional.

INVARIANT: Parsing is structural only. ``d=99`` parses into a term that
never matches a real date.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from whencal.domain.dates import (
    date_range,
    day_of_year,
    parse_unsigned,
    week_of_month,
    weekday_number,
)
from whencal.domain.months import resolve_month

WILDCARD_TOKEN = "*"
TERM_SEPARATOR = "&"


class ExpressionErrorKind(StrEnum):
    """Classification of expression parse failures."""

    BAD_YEAR = "bad_year"
    BAD_MONTH = "bad_month"
    BAD_DAY = "bad_day"
    BAD_SHAPE = "bad_shape"
    BAD_TERM = "bad_term"
    UNKNOWN_KEY = "unknown_key"
    BAD_VALUE = "bad_value"


class ExpressionError(ValueError):
    """Raised when a date expression cannot be parsed."""

    def __init__(self, kind: ExpressionErrorKind, message: str, token: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.token = token


class TermKind(StrEnum):
    """Conjunctive term keys."""

    WEEKDAY = "w"
    MONTH = "m"
    DAY_OF_MONTH = "d"
    YEAR = "y"
    WEEK_OF_MONTH = "a"
    DAY_OF_YEAR = "z"


# --- Number matches ---


@dataclass(frozen=True)
class Wildcard:
    """Matches any value of a date field."""

    def matches(self, value: int) -> bool:
        return True


@dataclass(frozen=True)
class Exact:
    """Matches exactly one value of a date field."""

    value: int

    def matches(self, value: int) -> bool:
        return self.value == value


NumberMatch = Wildcard | Exact


# --- Checkers ---


@dataclass(frozen=True)
class DateTerm:
    """One ``key=value`` constraint of a conjunctive expression."""

    kind: TermKind
    value: int

    def matches(self, value: date) -> bool:
        return _TERM_FIELDS[self.kind](value) == self.value


@dataclass(frozen=True)
class PositionalChecker:
    """Year/month/day triple, each field optionally wildcarded."""

    year: NumberMatch
    month: NumberMatch
    day: NumberMatch


@dataclass(frozen=True)
class ConjunctiveChecker:
    """Terms ANDed together in parse order. No terms matches every date."""

    terms: tuple[DateTerm, ...] = ()


DateChecker = PositionalChecker | ConjunctiveChecker


_TERM_FIELDS = {
    TermKind.WEEKDAY: weekday_number,
    TermKind.MONTH: lambda d: d.month,
    TermKind.DAY_OF_MONTH: lambda d: d.day,
    TermKind.YEAR: lambda d: d.year,
    TermKind.WEEK_OF_MONTH: week_of_month,
    TermKind.DAY_OF_YEAR: day_of_year,
}


# --- Parsing ---


def _parse_field(token: str, kind: ExpressionErrorKind, label: str) -> NumberMatch:
    if token == WILDCARD_TOKEN:
        return Wildcard()
    value = parse_unsigned(token)
    if value is None:
        raise ExpressionError(kind, f"Bad {label}: {token!r}", token)
    return Exact(value)


def _parse_positional(text: str) -> PositionalChecker:
    tokens = text.split()
    if len(tokens) != 3:
        msg = f"Bad date expression {text!r}: expected 'year month day'"
        raise ExpressionError(ExpressionErrorKind.BAD_SHAPE, msg, text)

    year = _parse_field(tokens[0], ExpressionErrorKind.BAD_YEAR, "year")
    month = resolve_month(tokens[1])
    if month is None:
        raise ExpressionError(
            ExpressionErrorKind.BAD_MONTH, f"Bad month: {tokens[1]!r}", tokens[1]
        )
    day = _parse_field(tokens[2], ExpressionErrorKind.BAD_DAY, "day")
    return PositionalChecker(year=year, month=Exact(month), day=day)


def _parse_term(token: str) -> DateTerm:
    parts = token.split("=")
    if len(parts) != 2:
        msg = f"Bad term {token!r}: expected 'key=value'"
        raise ExpressionError(ExpressionErrorKind.BAD_TERM, msg, token)

    key, raw = parts
    try:
        kind = TermKind(key)
    except ValueError:
        msg = f"Unknown key {key!r} in term {token!r}"
        raise ExpressionError(ExpressionErrorKind.UNKNOWN_KEY, msg, token) from None

    value = parse_unsigned(raw)
    if value is None and kind is TermKind.MONTH:
        value = resolve_month(raw)
    if value is None:
        msg = f"Bad value {raw!r} for key {key!r}"
        raise ExpressionError(ExpressionErrorKind.BAD_VALUE, msg, token)
    return DateTerm(kind=kind, value=value)


def _parse_conjunctive(text: str) -> ConjunctiveChecker:
    tokens = text.replace(TERM_SEPARATOR, f" {TERM_SEPARATOR} ").split()
    terms = tokens[0::2]
    separators_ok = all(tok == TERM_SEPARATOR for tok in tokens[1::2])
    if len(tokens) % 2 == 0 or not separators_ok or TERM_SEPARATOR in terms:
        msg = f"Bad date expression {text!r}: terms must be joined by '&'"
        raise ExpressionError(ExpressionErrorKind.BAD_SHAPE, msg, text)
    return ConjunctiveChecker(terms=tuple(_parse_term(tok) for tok in terms))


def parse(expr: str) -> DateChecker:
    """Parse a date expression into a checker.

    Raises:
        ExpressionError: If the expression is malformed. The error's
            ``kind`` tells shape, field and term failures apart.
    """
    text = expr.strip()
    if "=" not in text and TERM_SEPARATOR not in text:
        return _parse_positional(text)
    return _parse_conjunctive(text)


# --- Matching ---


def check_date(checker: DateChecker, value: date) -> bool:
    """Return True if *value* satisfies *checker*."""
    if isinstance(checker, PositionalChecker):
        return (
            checker.year.matches(value.year)
            and checker.month.matches(value.month)
            and checker.day.matches(value.day)
        )
    if isinstance(checker, ConjunctiveChecker):
        return all(term.matches(value) for term in checker.terms)
    raise TypeError(f"Unsupported checker: {checker!r}")


def check_date_range(checker: DateChecker, first: date, last: date) -> list[date]:
    """Return every date in ``[first, last]`` matching *checker*, ascending.

    An inverted range (*first* after *last*) yields an empty list.
    """
    return [d for d in date_range(first, last) if check_date(checker, d)]
