"""Command: first-run setup (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from whencal.commands._base import WhenCommand

if TYPE_CHECKING:
    from whencal.commands._context import AppContext


@click.command("init", cls=WhenCommand)
@click.option("--editor", default=None, help="Command used to edit the calendar file.")
@click.pass_obj
def init_cmd(app: AppContext, editor: str | None) -> None:
    """Create the preferences file and an empty calendar.
    \f
    whencal init
    whencal init --editor "vim"
    whencal --no-interact --calendar ~/cal.txt init
    WHENCAL_PREFERENCES=~/dotfiles/whencal whencal init
    """
    from whencal.config.discovery import resolve_preferences_path
    from whencal.infrastructure.filesystem import CALENDAR_FILENAME

    prefs_path = app.settings.preferences_path or resolve_preferences_path()
    calendar = app.settings.calendar or prefs_path.parent / CALENDAR_FILENAME
    interactive = not app.settings.no_interact

    if interactive:
        click.echo(f"This creates {prefs_path} and a calendar file at {calendar}.")
        if not click.confirm("Set up your calendar now?", default=True):
            return

    if editor is None:
        editor = (
            click.prompt("Editor command", default=app.settings.editor)
            if interactive
            else app.settings.editor
        )

    from whencal.services.init import InitService

    app.emit(InitService.init(Path(prefs_path), calendar=Path(calendar), editor=editor))
