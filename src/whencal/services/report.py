"""ReportService — calendar entries falling inside the report window.

The window is the closed range ``[today + past, today + future]``. Every
date in the window matched by a line's expression becomes one report item.
Lines whose expression does not parse are skipped with a warning.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any

from whencal.domain.dates import add_days
from whencal.domain.expressions import ExpressionError, check_date_range, parse
from whencal.services.base import MISSING_COMMA, BaseService, CalendarUnavailable
from whencal.services.result import ServiceResult

logger = logging.getLogger(__name__)


def day_label(value: date, today: date) -> str:
    """``today``, ``yesterday``, ``tomorrow``, or an empty string."""
    offset = (value - today).days
    if offset == 0:
        return "today"
    if offset == -1:
        return "yesterday"
    if offset == 1:
        return "tomorrow"
    return ""


class ReportService(BaseService):
    """Builds the reminder report for a date window."""

    def report(
        self,
        now: datetime,
        *,
        past: int | None = None,
        future: int | None = None,
    ) -> ServiceResult:
        """Report every calendar entry matching a date in the window.

        Args:
            now: The reference moment; its date is "today".
            past: Window start offset in days; defaults to the ``past`` setting.
            future: Window end offset in days; defaults to the ``future`` setting.
        """
        today = now.date()
        past = self._settings.past if past is None else past
        future = self._settings.future if future is None else future
        try:
            first = add_days(today, past)
            last = add_days(today, future)
        except OverflowError:
            return ServiceResult.failure(
                "report",
                "BAD_WINDOW",
                f"Report window {past}..{future} days from {today} is out of range",
                past=past,
                future=future,
            )

        try:
            entries, bad_lines = self._load_calendar()
        except CalendarUnavailable as exc:
            return self._failure("report", exc)

        skipped = [(number, MISSING_COMMA) for number, _ in bad_lines]
        items: list[dict[str, Any]] = []
        for entry in entries:
            try:
                checker = parse(entry.expression)
            except ExpressionError as exc:
                logger.debug("Skipping line %d: %s", entry.line, exc.message)
                skipped.append((entry.line, exc.message))
                continue
            for matched in check_date_range(checker, first, last):
                items.append(
                    {
                        "date": matched.isoformat(),
                        "label": day_label(matched, today),
                        "description": entry.description.strip(),
                        "line": entry.line,
                    }
                )

        items.sort(key=lambda item: (item["date"], item["line"]))
        skipped.sort()
        return ServiceResult(
            ok=True,
            op="report",
            data={
                "today": today.isoformat(),
                "time": now.strftime("%H:%M"),
                "first": first.isoformat(),
                "last": last.isoformat(),
                "count": len(items),
                "items": items,
            },
            warnings=[f"line {number}: {message}" for number, message in skipped],
        )
