"""CheckService — validate every line of the calendar file.

Follows the linter pattern: report issues, never modify the file.
A line is an error when it lacks the ``expression,description`` comma or
its expression does not parse.
"""

from __future__ import annotations

from typing import Any

from whencal.domain.expressions import ExpressionError, parse
from whencal.services.base import MISSING_COMMA, BaseService, CalendarUnavailable
from whencal.services.result import ServiceResult

SEVERITY_ERROR = "error"
KIND_BAD_LINE = "bad_line"


class CheckService(BaseService):
    """Reports calendar lines that the report would skip."""

    def check(self) -> ServiceResult:
        """Report every malformed calendar line."""
        try:
            entries, bad_lines = self._load_calendar()
        except CalendarUnavailable as exc:
            return self._failure("check", exc)

        issues: list[dict[str, Any]] = [
            {
                "line": number,
                "severity": SEVERITY_ERROR,
                "kind": KIND_BAD_LINE,
                "message": MISSING_COMMA,
                "text": text,
            }
            for number, text in bad_lines
        ]
        for entry in entries:
            try:
                parse(entry.expression)
            except ExpressionError as exc:
                issues.append(
                    {
                        "line": entry.line,
                        "severity": SEVERITY_ERROR,
                        "kind": str(exc.kind),
                        "message": exc.message,
                        "text": entry.expression,
                    }
                )

        issues.sort(key=lambda issue: issue["line"])
        return ServiceResult(
            ok=True,
            op="check",
            data={
                "path": str(self.calendar_path),
                "entries": len(entries),
                "count": len(issues),
                "healthy": not issues,
                "issues": issues,
            },
        )
