"""Command: coerce a value from the shell."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from chronotypes.commands._base import ChronoCommand

if TYPE_CHECKING:
    from chronotypes.commands._context import AppContext

INPUT_KINDS = ("auto", "string", "number", "mapping")


def parse_input(raw: str, kind: str) -> Any:
    """Turn a command-line argument into the input value for coercion.

    ``auto`` accepts JSON numbers and objects and otherwise keeps the raw
    string, so ``now`` stays a string while ``0`` becomes a number.
    """
    if kind == "string":
        return raw
    if kind == "number":
        try:
            return int(raw)
        except ValueError:
            pass
        try:
            return float(raw)
        except ValueError as exc:
            msg = f"{raw!r} is not a number"
            raise click.BadParameter(msg, param_hint="VALUE") from exc
    if kind == "mapping":
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            msg = f"invalid JSON: {exc}"
            raise click.BadParameter(msg, param_hint="VALUE") from exc
        if not isinstance(parsed, dict):
            msg = "expected a JSON object"
            raise click.BadParameter(msg, param_hint="VALUE")
        return parsed

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        return raw
    if isinstance(parsed, bool) or not isinstance(parsed, (int, float, dict, str)):
        return raw
    return parsed


@click.command(
    "coerce",
    cls=ChronoCommand,
    examples="""\
  chronotypes coerce DateTimeValue 0
  chronotypes coerce DateTimeValue now
  chronotypes coerce DateTimeValue '{"year": 2008, "month": 3, "day": 1}'
  chronotypes coerce Duration 86400
  chronotypes coerce TimeZone Africa/Timbuktu
  chronotypes coerce TimeZone +0530
  chronotypes --json coerce Locale he_IL
  chronotypes coerce Duration 90 --as string""",
)
@click.argument("name")
@click.argument("value")
@click.option(
    "--as",
    "kind",
    type=click.Choice(INPUT_KINDS),
    default="auto",
    help="How to interpret VALUE before coercion.",
)
@click.pass_obj
def coerce_cmd(app: AppContext, name: str, value: str, kind: str) -> None:
    """Coerce VALUE to the registered type NAME."""
    app.emit(app.registry.try_coerce(name, parse_input(value, kind)))
