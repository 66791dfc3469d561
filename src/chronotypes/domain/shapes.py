"""Input shape predicates.

Each predicate answers one question about an arbitrary value and never
raises. :func:`classify_shape` folds them into a single :class:`Shape`.

INVARIANT: The shapes are mutually exclusive. ``bool`` is not numeric,
and a numeric-looking string is still a string.
"""

from __future__ import annotations

import numbers
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Protocol

from chronotypes.domain.types import Shape

NOW_LITERAL = "now"


class LanguageTagged(Protocol):
    """Anything carrying a locale language tag (e.g. a translation handle)."""

    language_tag: Any


def is_numeric(value: object) -> bool:
    """Real number (or ``Decimal``) that is not a ``bool``."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


def is_string(value: object) -> bool:
    return isinstance(value, str)


def is_string_mapping(value: object) -> bool:
    """Mapping whose keys are all strings.

    Examples:
        >>> is_string_mapping({"year": 2008})
        True
        >>> is_string_mapping({1: "a"})
        False
    """
    if not isinstance(value, Mapping):
        return False
    return all(isinstance(key, str) for key in value)


def is_now_literal(value: object) -> bool:
    """Exactly the string ``"now"``: case-sensitive, no whitespace tolerance."""
    return type(value) is str and value == NOW_LITERAL


def is_language_tagged(value: object) -> bool:
    """Non-string object exposing a ``language_tag`` attribute or method.

    Checked with ``hasattr`` so proxies that resolve ``language_tag`` in
    ``__getattr__`` qualify.
    """
    if isinstance(value, str):
        return False
    return hasattr(value, "language_tag")


def language_tag_of(value: object) -> str:
    """Read the language tag from a :class:`LanguageTagged` object.

    ``language_tag`` may be a plain attribute or a zero-argument method.
    """
    tag = value.language_tag  # type: ignore[attr-defined]
    if callable(tag):
        tag = tag()
    if not isinstance(tag, str):
        msg = f"language_tag must be a string, got {type(tag).__name__}"
        raise TypeError(msg)
    return tag


def classify_shape(value: object) -> Shape:
    """Return the single :class:`Shape` *value* belongs to."""
    if is_numeric(value):
        return Shape.NUMERIC
    if is_string(value):
        return Shape.STRING
    if is_string_mapping(value):
        return Shape.MAPPING
    if is_language_tagged(value):
        return Shape.LANGUAGE_TAGGED
    return Shape.OTHER
