"""Root CLI group for chronotypes with global flags and command registration."""

from __future__ import annotations

import click

from chronotypes import __version__
from chronotypes.commands import register_commands
from chronotypes.commands._base import ChronoGroup
from chronotypes.commands._context import AppContext
from chronotypes.config.settings import ChronoSettings


@click.group(cls=ChronoGroup, invoke_without_command=True)
@click.version_option(version=__version__, prog_name="chronotypes")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-plugins", is_flag=True, help="Skip entry-point plugins.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    no_plugins: bool,
) -> None:
    """chronotypes — inspect date/time types and try coercions."""
    ctx.ensure_object(dict)
    settings = ChronoSettings.from_cli(
        json_output=json_output,
        verbose=verbose,
        log_json=log_json,
    )
    if no_plugins:
        settings = settings.model_copy(update={"plugins_enabled": False})
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
