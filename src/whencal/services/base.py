"""BaseService — shared foundation for whencal services.

Every service receives the frozen :class:`WhenSettings` at construction
time and resolves the calendar file from it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from whencal.domain.calendar import CalendarEntry
from whencal.infrastructure.filesystem import read_calendar
from whencal.services.result import Operation, ServiceError, ServiceResult

if TYPE_CHECKING:
    from whencal.config.settings import WhenSettings

logger = logging.getLogger(__name__)

MISSING_COMMA = "no ',' separating date expression and description"

NO_CALENDAR = ServiceError(
    code="NO_CALENDAR",
    message="No calendar configured; run 'whencal init' or pass --calendar",
)


class CalendarUnavailable(Exception):
    """The calendar file is not configured or cannot be read."""

    def __init__(self, error: ServiceError) -> None:
        super().__init__(error.message)
        self.error = error


class BaseService:
    """Base for service classes that work on the configured calendar file."""

    def __init__(self, settings: WhenSettings) -> None:
        self._settings = settings

    @property
    def calendar_path(self) -> Path | None:
        return self._settings.calendar

    def _load_calendar(self) -> tuple[list[CalendarEntry], list[tuple[int, str]]]:
        """Read the calendar file or raise :class:`CalendarUnavailable`."""
        path = self.calendar_path
        if path is None:
            raise CalendarUnavailable(NO_CALENDAR)
        try:
            return read_calendar(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Reading calendar %s failed", path, exc_info=True)
            raise CalendarUnavailable(
                ServiceError(
                    code="CALENDAR_UNREADABLE",
                    message=f"Failure opening {path}: {exc}",
                    detail={"path": str(path)},
                )
            ) from exc

    @staticmethod
    def _failure(op: Operation, exc: CalendarUnavailable) -> ServiceResult:
        return ServiceResult.from_error(op, exc.error)
