"""Command: validate the calendar file."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from whencal.commands._base import WhenCommand

if TYPE_CHECKING:
    from whencal.commands._context import AppContext


@click.command(cls=WhenCommand)
@click.option("--strict", is_flag=True, help="Exit with code 1 when any line is malformed.")
@click.pass_obj
def check(app: AppContext, strict: bool) -> None:
    """Report calendar lines whose date expression does not parse.
    \f
    whencal check
    whencal -v check
    whencal --json check
    whencal check --strict
    """
    from whencal.services.check import CheckService

    result = CheckService(app.settings).check()
    app.emit(result)
    if strict and result.ok and not result.data.get("healthy", True):
        raise SystemExit(1)
