"""InitService — first-run setup of the preferences and calendar files."""

from __future__ import annotations

import logging
from pathlib import Path

from whencal.infrastructure.filesystem import touch_calendar, write_preferences
from whencal.services.result import ServiceResult

logger = logging.getLogger(__name__)


class InitService:
    """Creates ``~/.whencal/preferences`` and an empty calendar file.

    Static, like the other setup paths: there is no calendar to load yet.
    """

    @staticmethod
    def init(preferences_path: Path, *, calendar: Path, editor: str) -> ServiceResult:
        """Write the preferences file and create the calendar if missing.

        Refuses to overwrite an existing preferences file.
        """
        if preferences_path.exists():
            return ServiceResult.failure(
                "init",
                "ALREADY_INITIALIZED",
                f"Preferences file already exists: {preferences_path}",
                path=str(preferences_path),
            )

        try:
            write_preferences(preferences_path, {"calendar": str(calendar), "editor": editor})
            created = touch_calendar(calendar)
        except OSError as exc:
            return ServiceResult.failure("init", "INIT_FAILED", str(exc))

        logger.debug("Initialized preferences at %s", preferences_path)
        warnings = [] if created else [f"Calendar file already exists, kept: {calendar}"]
        return ServiceResult(
            ok=True,
            op="init",
            data={
                "preferences": str(preferences_path),
                "calendar": str(calendar),
                "editor": editor,
            },
            warnings=warnings,
        )
