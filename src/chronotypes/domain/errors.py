"""Error taxonomy for registry lookups and coercion attempts.

- :class:`UnknownTypeError`: a type name that was never registered.
  Programmer error, never retried.
- :class:`NoApplicableRuleError`: the input was not already of the target
  type and no rule matched its shape.
- :class:`ConversionFailedError`: the matched rule's underlying library call
  rejected the input. The library's message is kept unchanged and the
  library exception is chained as ``__cause__``.
"""

from __future__ import annotations

from typing import Any

from chronotypes.domain.types import CoercionReason


class ChronoTypesError(Exception):
    """Base class for all chronotypes errors."""


class UnknownTypeError(ChronoTypesError, LookupError):
    """Raised when a type name is not present in the registry."""

    def __init__(self, type_name: str) -> None:
        self.type_name = str(type_name)
        super().__init__(f"Unknown type: {self.type_name!r}")


class CoercionError(ChronoTypesError, ValueError):
    """A single coercion attempt failed."""

    reason: CoercionReason

    def __init__(self, type_name: str, value: Any, message: str) -> None:
        self.type_name = str(type_name)
        self.value = value
        self.message = message
        super().__init__(message)

    def to_detail(self) -> dict[str, Any]:
        """JSON-friendly description of the failure."""
        return {
            "type_name": self.type_name,
            "reason": str(self.reason),
            "input_type": type(self.value).__name__,
            "input": repr(self.value),
        }


class NoApplicableRuleError(CoercionError):
    """No coercion rule accepts the input's shape."""

    reason = CoercionReason.NO_APPLICABLE_RULE

    def __init__(self, type_name: str, value: Any) -> None:
        message = f"No coercion to {type_name} from {type(value).__name__} value {value!r}"
        super().__init__(type_name, value, message)


class ConversionFailedError(CoercionError):
    """The matched rule's converter raised."""

    reason = CoercionReason.CONVERSION_FAILED

    def __init__(self, type_name: str, value: Any, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(type_name, value, library_message(cause))


def library_message(exc: BaseException) -> str:
    """The message a library exception was raised with.

    ``str()`` of a ``KeyError`` is the repr of its argument, so
    ``ZoneInfoNotFoundError("No time zone found ...")`` would gain quotes.

    Examples:
        >>> library_message(KeyError("No time zone found with key X"))
        'No time zone found with key X'
        >>> library_message(ValueError("month must be in 1..12"))
        'month must be in 1..12'
    """
    if isinstance(exc, KeyError) and len(exc.args) == 1 and isinstance(exc.args[0], str):
        return exc.args[0]
    return str(exc)
