"""Commands: reminder reports for the coming week, month, or year.

Running ``whencal`` without a subcommand reports the default window
(``--past`` .. ``--future`` days around today).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from whencal.commands._base import WhenCommand

if TYPE_CHECKING:
    from whencal.commands._context import AppContext

WEEK_DAYS = 7
MONTH_DAYS = 31
YEAR_DAYS = 366


def run_report(app: AppContext, *, future: int | None = None) -> None:
    """Build and emit the report, overriding the window end if given."""
    from whencal.services.report import ReportService

    app.emit(ReportService(app.settings).report(app.now(), future=future))


@click.command("w", cls=WhenCommand)
@click.pass_obj
def week(app: AppContext) -> None:
    """Print items for the coming week.
    \f
    whencal w
    whencal --noheader w
    """
    run_report(app, future=WEEK_DAYS)


@click.command("m", cls=WhenCommand)
@click.pass_obj
def month(app: AppContext) -> None:
    """Print items for the coming month.
    \f
    whencal m
    whencal --past -7 m
    """
    run_report(app, future=MONTH_DAYS)


@click.command("y", cls=WhenCommand)
@click.pass_obj
def year(app: AppContext) -> None:
    """Print items for the coming year.
    \f
    whencal y
    whencal --json y
    """
    run_report(app, future=YEAR_DAYS)
