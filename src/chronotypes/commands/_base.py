"""Click command classes shared by every chronotypes command.

A command built with ``examples="..."`` gets an eager ``--examples`` flag.
Being eager, it prints the text and exits before required arguments are
checked, so ``chronotypes coerce --examples`` needs no NAME or VALUE.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(ctx.command, "examples", None) or "")
    ctx.exit(0)


class _ExamplesMixin:
    """Accept an ``examples`` keyword and expose it as ``--examples``."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)  # type: ignore[call-arg]
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples and exit.",
                )
            )


class ChronoCommand(_ExamplesMixin, click.Command):
    """A command with optional ``--examples``."""


class ChronoGroup(_ExamplesMixin, click.Group):
    """A group whose ``@group.command()`` subcommands default to :class:`ChronoCommand`."""

    command_class = ChronoCommand
