"""Commands: list and describe registered types."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chronotypes.commands._base import ChronoCommand
from chronotypes.domain.errors import UnknownTypeError
from chronotypes.services.result import CoercionFailure, CoercionResult

if TYPE_CHECKING:
    from chronotypes.commands._context import AppContext


@click.command(
    "types",
    cls=ChronoCommand,
    examples="""\
  chronotypes types
  chronotypes --json types""",
)
@click.pass_obj
def types_cmd(app: AppContext) -> None:
    """List registered types and the input shapes they coerce from."""
    registry = app.registry
    app.emit_descriptors([registry.describe(name) for name in registry.names()])


@click.command(
    "describe",
    cls=ChronoCommand,
    examples="""\
  chronotypes describe TimeZone
  chronotypes describe datetime.timedelta""",
)
@click.argument("name")
@click.pass_obj
def describe_cmd(app: AppContext, name: str) -> None:
    """Show one registered type (by name or alias)."""
    try:
        descriptor = app.registry.describe(name)
    except UnknownTypeError as exc:
        app.emit(
            CoercionResult(ok=False, type_name=name, error=CoercionFailure.unknown_type(exc))
        )
        return
    app.emit_descriptors([descriptor])
