"""Month-name resolution by case-insensitive prefix."""

from __future__ import annotations

MONTH_NAMES: tuple[str, ...] = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)


def month_from_name(text: str) -> int | None:
    """Resolve a month-name prefix to its 1-based month number.

    Only a prefix matching exactly one month resolves; empty, unknown and
    ambiguous prefixes return None.

    Examples:
        >>> month_from_name("Jan")
        1
        >>> month_from_name("ju") is None
        True
    """
    prefix = text.lower()
    if not prefix:
        return None
    matches = [i for i, name in enumerate(MONTH_NAMES, start=1) if name.startswith(prefix)]
    if len(matches) != 1:
        return None
    return matches[0]


def resolve_month(text: str) -> int | None:
    """Resolve a month given as digits or as a name prefix."""
    if text.isascii() and text.isdigit():
        return int(text)
    return month_from_name(text)
