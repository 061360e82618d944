"""Command: open the calendar file in the configured editor."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from whencal.commands._base import WhenCommand

if TYPE_CHECKING:
    from whencal.commands._context import AppContext


@click.command("e", cls=WhenCommand)
@click.pass_obj
def edit(app: AppContext) -> None:
    """Run the editor on the calendar file.
    \f
    whencal e
    WHENCAL_EDITOR="vim" whencal e
    whencal --calendar ~/work.cal e
    """
    from whencal.services.edit import EditService

    result = EditService(app.settings).edit()
    if not result.ok:
        app.emit(result)
