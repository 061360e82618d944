"""Root CLI group for whencal with global flags and command registration."""

from __future__ import annotations

import click

from whencal import __version__
from whencal.commands import register_commands
from whencal.commands._base import WhenGroup
from whencal.commands._context import AppContext
from whencal.config.settings import WhenSettings


@click.group(cls=WhenGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="whencal")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Non-interactive mode (no prompts).")
@click.option(
    "-p", "--preferences", "preferences_path", default=None, help="Override preferences file path."
)
@click.option(
    "--calendar",
    type=click.Path(dir_okay=False),
    default=None,
    help="Calendar file. Defaults to the one named in the preferences file.",
)
@click.option(
    "--future",
    type=int,
    default=None,
    help="How many days into the future the report extends. Default: 14",
)
@click.option(
    "--past",
    type=int,
    default=None,
    help="Offset of the report start relative to today, normally negative. Default: -1",
)
@click.option("--header", is_flag=True, help="Print the date header line.")
@click.option("--noheader", is_flag=True, help="Don't print the date header line.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    preferences_path: str | None,
    calendar: str | None,
    future: int | None,
    past: int | None,
    header: bool,
    noheader: bool,
) -> None:
    """whencal — simple personal calendar utility.

    Each line of the calendar file is ``<date expression>,<description>``.
    Expressions are either ``<year|*> <month> <day|*>`` (e.g. ``* Dec 25``)
    or ``key=value`` terms joined by ``&`` (e.g. ``m=jan & w=1 & a=3``) with
    keys w (weekday, 1=Mon), m (month), d (day), y (year), a (week of
    month) and z (day of year).
    \f
    whencal
    whencal --future 30 --past -3
    whencal --noheader --calendar ~/work.cal
    whencal --json w
    """
    # Unset flags pass None so env vars and preferences still apply.
    header_flag = False if noheader else (True if header else None)
    settings = WhenSettings.from_cli(
        preferences_path=preferences_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        no_interact=no_interact or None,
        calendar=calendar,
        future=future,
        past=past,
        header=header_flag,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from whencal.commands.report import run_report

        run_report(ctx.obj)


register_commands(cli)
