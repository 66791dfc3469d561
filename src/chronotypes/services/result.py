"""CoercionResult and CoercionFailure — the explicit-result coercion contract.

``TypeRegistry.coerce`` raises; ``TypeRegistry.try_coerce`` returns one of
these instead, for callers that prefer to branch on ``ok``. The CLI renders
them through :mod:`chronotypes.output.formatters`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chronotypes.domain.errors import UnknownTypeError


class CoercionFailure(BaseModel):
    """Structured error payload within a CoercionResult.

    ``code`` is one of ``unknown_type``, ``no_applicable_rule`` or
    ``conversion_failed``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def unknown_type(cls, exc: UnknownTypeError) -> CoercionFailure:
        return cls(code="unknown_type", message=str(exc), detail={"type_name": exc.type_name})


class CoercionResult(BaseModel):
    """Outcome of a single coercion attempt.

    Attributes:
        ok: Whether the coercion succeeded.
        type_name: Requested type name as given by the caller.
        value: The coerced value on success, None otherwise.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    type_name: str
    value: Any = None
    error: CoercionFailure | None = None
