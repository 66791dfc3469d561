"""Rich/JSON output helpers.

The CLI renders CoercionResult and TypeDescriptor for humans (Rich text and
tables) or machines (--json). Coerced values are shown in their
JSON-friendly form from :func:`serialize_value`.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel
from rich.table import Table
from rich.text import Text

from chronotypes.infrastructure.adapters import serialize_value
from chronotypes.output.console import create_console, get_output

if TYPE_CHECKING:
    from chronotypes.domain.rules import TypeDescriptor
    from chronotypes.services.result import CoercionResult


class OutputSettings(BaseModel):
    """How results are rendered."""

    model_config = {"frozen": True}

    json_output: bool = False


def result_payload(result: CoercionResult) -> dict[str, Any]:
    """JSON-friendly dict for a CoercionResult."""
    payload: dict[str, Any] = {"ok": result.ok, "type_name": result.type_name}
    if result.ok:
        payload["value"] = serialize_value(result.value)
        payload["value_type"] = type(result.value).__name__
    else:
        payload["error"] = result.error.model_dump() if result.error else None
    return payload


def format_result(result: CoercionResult, *, settings: OutputSettings | None = None) -> str:
    """Format a CoercionResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps(result_payload(result), indent=2, default=str)

    console = create_console()
    if result.ok:
        line = Text("OK", style="chrono.ok")
        line.append(f"  {result.type_name}", style="chrono.type")
        line.append(f"  {serialize_value(result.value)}", style="chrono.value")
        line.append(f"  ({type(result.value).__name__})", style="chrono.key")
    else:
        code = result.error.code if result.error else "error"
        message = result.error.message if result.error else "Unknown error"
        line = Text("ERROR", style="chrono.error")
        line.append(f"  {result.type_name}", style="chrono.type")
        line.append(f"  [{code}] {message}")
    console.print(line)
    return get_output(console).rstrip("\n")


def format_descriptors(
    descriptors: list[TypeDescriptor], *, settings: OutputSettings | None = None
) -> str:
    """Format registered type descriptors as a table or JSON list."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return _json.dumps([d.summary() for d in descriptors], indent=2)

    table = Table(title="Registered types")
    table.add_column("Type", style="chrono.type")
    table.add_column("Aliases", style="chrono.key")
    table.add_column("Coercions from")
    table.add_column("Description")
    for descriptor in descriptors:
        summary = descriptor.summary()
        table.add_row(
            summary["name"],
            ", ".join(summary["aliases"]) or "-",
            ", ".join(summary["coercions"]) or "-",
            summary["description"],
        )

    console = create_console()
    console.print(table)
    return get_output(console).rstrip("\n")
