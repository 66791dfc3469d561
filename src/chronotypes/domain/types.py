"""Type names and classification enums.

These enums name the four date/time target types plus the auxiliary
``NowLiteral`` constraint, the closed set of input shapes, and the two
coercion failure reasons.
"""

from __future__ import annotations

from enum import StrEnum


class TypeName(StrEnum):
    """Built-in registered type names."""

    DATETIME = "DateTimeValue"
    DURATION = "Duration"
    TIMEZONE = "TimeZone"
    LOCALE = "Locale"
    NOW_LITERAL = "NowLiteral"


class Shape(StrEnum):
    """Coarse structural category of an input value."""

    NUMERIC = "numeric"
    STRING = "string"
    MAPPING = "mapping"
    LANGUAGE_TAGGED = "language_tagged"
    OTHER = "other"


class CoercionReason(StrEnum):
    """Why a coercion attempt failed."""

    NO_APPLICABLE_RULE = "no_applicable_rule"
    CONVERSION_FAILED = "conversion_failed"
