"""Click base classes with a docstring-driven ``--examples`` flag.

A command's usage examples are the part of its docstring after the ``\\f``
marker. Click already cuts that part from ``--help``; ``--examples`` prints
it instead and exits. Commands without the marker get no ``--examples``.
"""

from __future__ import annotations

import inspect
import textwrap
from typing import Any

import click

EXAMPLES_MARKER = "\f"


def examples_from_doc(doc: str | None) -> str:
    """Return the dedented docstring text after the ``\\f`` marker, or ``""``."""
    if not doc or EXAMPLES_MARKER not in doc:
        return ""
    return inspect.cleandoc(doc.partition(EXAMPLES_MARKER)[2])


def _show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(textwrap.indent(ctx.command.examples, "  "))  # type: ignore[attr-defined]
    ctx.exit(0)


class ExamplesMixin:
    """Give a Click command or group ``--examples`` from its callback docstring."""

    examples: str

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        callback = getattr(self, "callback", None)
        self.examples = examples_from_doc(callback.__doc__ if callback else None)
        if self.examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples,
                    help="Show usage examples.",
                )
            )


class WhenCommand(ExamplesMixin, click.Command):
    pass


class WhenGroup(ExamplesMixin, click.Group):
    """Group whose ``@group.command`` subcommands are :class:`WhenCommand`."""

    command_class = WhenCommand
