"""Subcommand modules for chronotypes.

Provides register_commands() which uses deferred imports to keep
``chronotypes --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from chronotypes.commands.coerce import coerce_cmd
    from chronotypes.commands.types_cmd import describe_cmd, types_cmd

    cli.add_command(types_cmd)
    cli.add_command(describe_cmd)
    cli.add_command(coerce_cmd)
