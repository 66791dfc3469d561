"""Built-in date/time types and their coercion tables.

=============  ===============  ==================  ===============  ================
Type           numeric          string              string mapping   language-tagged
=============  ===============  ==================  ===============  ================
DateTimeValue  from epoch       ``"now"`` only      datetime(**m)
Duration       seconds=value                        timedelta(**m)
TimeZone                        name or offset
Locale                          load tag                             load .language_tag
=============  ===============  ==================  ===============  ================

``NowLiteral`` is registered as a type of its own: its target predicate
accepts exactly ``"now"`` and it has no coercions. The DateTimeValue
``"now"`` rule reuses that predicate, and any other string has no rule.
"""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import TYPE_CHECKING

from babel import Locale

from chronotypes.domain.shapes import (
    is_language_tagged,
    is_now_literal,
    is_numeric,
    is_string,
    is_string_mapping,
)
from chronotypes.domain.types import Shape, TypeName
from chronotypes.infrastructure import adapters

if TYPE_CHECKING:
    from chronotypes.services.registry import TypeRegistry


def _is_datetime(value: object) -> bool:
    return isinstance(value, datetime)


def _is_duration(value: object) -> bool:
    return isinstance(value, timedelta)


def _is_timezone(value: object) -> bool:
    return isinstance(value, tzinfo)


def _is_locale(value: object) -> bool:
    return isinstance(value, Locale)


def install_datetime_types(registry: TypeRegistry) -> None:
    """Register the built-in types, rules and aliases on *registry*.

    Rules are appended, so call this once per registry.
    """
    registry.register_type(
        TypeName.NOW_LITERAL,
        is_target=is_now_literal,
        description="The exact string 'now'.",
    )

    registry.register_type(
        TypeName.DATETIME,
        is_target=_is_datetime,
        description="A datetime.datetime instance.",
    )
    registry.add_coercion(
        TypeName.DATETIME, is_numeric, adapters.datetime_from_epoch, source=Shape.NUMERIC
    )
    registry.add_coercion(
        TypeName.DATETIME,
        is_string_mapping,
        adapters.datetime_from_fields,
        source=Shape.MAPPING,
    )
    registry.add_coercion(
        TypeName.DATETIME, is_now_literal, adapters.datetime_now, source=TypeName.NOW_LITERAL
    )

    registry.register_type(
        TypeName.DURATION,
        is_target=_is_duration,
        description="A datetime.timedelta instance. Numbers are elapsed seconds.",
    )
    registry.add_coercion(
        TypeName.DURATION, is_numeric, adapters.duration_from_seconds, source=Shape.NUMERIC
    )
    registry.add_coercion(
        TypeName.DURATION,
        is_string_mapping,
        adapters.duration_from_fields,
        source=Shape.MAPPING,
    )

    registry.register_type(
        TypeName.TIMEZONE,
        is_target=_is_timezone,
        description="A datetime.tzinfo instance (IANA zone, fixed offset or local).",
    )
    registry.add_coercion(
        TypeName.TIMEZONE, is_string, adapters.timezone_from_string, source=Shape.STRING
    )

    registry.register_type(
        TypeName.LOCALE,
        is_target=_is_locale,
        description="A babel.Locale instance.",
    )
    registry.add_coercion(
        TypeName.LOCALE,
        is_language_tagged,
        adapters.locale_from_tagged,
        source=Shape.LANGUAGE_TAGGED,
    )
    registry.add_coercion(
        TypeName.LOCALE, is_string, adapters.locale_from_tag, source=Shape.STRING
    )

    registry.register_alias("datetime.datetime", TypeName.DATETIME)
    registry.register_alias("datetime.timedelta", TypeName.DURATION)
    registry.register_alias("datetime.tzinfo", TypeName.TIMEZONE)
    registry.register_alias("babel.Locale", TypeName.LOCALE)
