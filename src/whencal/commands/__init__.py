"""Subcommand modules for whencal.

Provides register_commands() which uses deferred imports to keep
``whencal --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from whencal.commands.check import check
    from whencal.commands.edit import edit
    from whencal.commands.init_cmd import init_cmd
    from whencal.commands.report import month, week, year

    cli.add_command(week)
    cli.add_command(month)
    cli.add_command(year)
    cli.add_command(edit)
    cli.add_command(init_cmd)
    cli.add_command(check)
