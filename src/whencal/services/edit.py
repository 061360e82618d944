"""EditService — open the calendar file in the configured editor."""

from __future__ import annotations

import logging
import shlex
import subprocess

from whencal.services.base import NO_CALENDAR, BaseService
from whencal.services.result import ServiceResult

logger = logging.getLogger(__name__)


class EditService(BaseService):
    """Runs ``<editor> <calendar>`` and waits for it to exit."""

    def edit(self) -> ServiceResult:
        path = self.calendar_path
        if path is None:
            return ServiceResult.from_error("edit", NO_CALENDAR)

        editor = self._settings.editor
        try:
            argv = [*shlex.split(editor), str(path)]
        except ValueError as exc:
            return ServiceResult.failure(
                "edit", "EDITOR_FAILED", f"Invalid editor command {editor!r}: {exc}", command=editor
            )

        logger.debug("Invoking editor: %s", argv)
        try:
            completed = subprocess.run(argv, check=False)
        except OSError as exc:
            return ServiceResult.failure(
                "edit", "EDITOR_FAILED", f"Invoking editor failed: {exc}", command=argv
            )
        if completed.returncode != 0:
            return ServiceResult.failure(
                "edit",
                "EDITOR_FAILED",
                f"Invoking editor failed (exit code {completed.returncode})",
                command=argv,
            )
        return ServiceResult(ok=True, op="edit", data={"path": str(path)})
