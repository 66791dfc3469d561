"""Adapters over the date/time value libraries.

Each function is a thin constructor call. Validation is left to the
underlying library; whatever it raises propagates to the registry, which
wraps it as a conversion failure.

Libraries:
- ``datetime``: datetimes, durations, fixed-offset zones.
- ``zoneinfo`` (backed by ``tzdata`` where the OS has no zone files): IANA zones.
- ``babel``: CLDR locales.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta, timezone, tzinfo
from decimal import Decimal
from numbers import Real
from typing import Any
from zoneinfo import ZoneInfo

from babel import Locale

from chronotypes.domain.shapes import language_tag_of

# +HH, +HHMM, +HH:MM, +HHMMSS, +HH:MM:SS
_OFFSET_RE = re.compile(r"^([+-])(\d{2})(?::?(\d{2}))?(?::?(\d{2}))?$")

LOCAL_ZONE_NAME = "local"


def _plain_number(value: Real | Decimal) -> int | float:
    return value if isinstance(value, int) else float(value)


# ---------------------------------------------------------------------------
# datetime
# ---------------------------------------------------------------------------


def datetime_from_epoch(value: Real | Decimal) -> datetime:
    """UTC datetime from Unix epoch seconds; the fraction is sub-second precision."""
    return datetime.fromtimestamp(_plain_number(value), tz=UTC)


def datetime_from_fields(fields: Mapping[str, Any]) -> datetime:
    """``datetime(**fields)``: keys are forwarded verbatim."""
    return datetime(**fields)


def datetime_now(_literal: str = "now") -> datetime:
    return datetime.now(UTC)


# ---------------------------------------------------------------------------
# Durations
# ---------------------------------------------------------------------------


def duration_from_seconds(value: Real | Decimal) -> timedelta:
    """Elapsed-seconds duration.

    Note that ``timedelta`` has no calendar units: 86400 seconds is a day
    of elapsed time, which is not always one calendar day across DST
    transitions, and leap seconds are not modelled at all.
    """
    return timedelta(seconds=_plain_number(value))


def duration_from_fields(fields: Mapping[str, Any]) -> timedelta:
    """``timedelta(**fields)``: keys are forwarded verbatim."""
    return timedelta(**fields)


# ---------------------------------------------------------------------------
# Time zones
# ---------------------------------------------------------------------------


def parse_offset(text: str) -> timedelta | None:
    """Parse ``+HH[[:]MM[[:]SS]]`` into a timedelta, or None if not an offset.

    Examples:
        >>> parse_offset("+0530")
        datetime.timedelta(seconds=19800)
        >>> parse_offset("Europe/Paris") is None
        True
    """
    match = _OFFSET_RE.match(text)
    if match is None:
        return None
    sign, hours, minutes, seconds = match.groups()
    offset = timedelta(
        hours=int(hours),
        minutes=int(minutes or 0),
        seconds=int(seconds or 0),
    )
    return -offset if sign == "-" else offset


def local_timezone() -> tzinfo:
    """The system's local zone, as reported by the OS."""
    zone = datetime.now().astimezone().tzinfo
    if zone is None:
        msg = "Cannot determine the local time zone"
        raise ValueError(msg)
    return zone


def timezone_from_string(name: str) -> tzinfo:
    """Time zone from an IANA name, a UTC offset string, or ``"local"``.

    Offsets become fixed-offset zones named by the input string. ``timezone``
    itself rejects offsets of 24 hours or more.
    """
    if name == LOCAL_ZONE_NAME:
        return local_timezone()
    offset = parse_offset(name)
    if offset is not None:
        return timezone(offset, name)
    return ZoneInfo(name)


def timezone_name(zone: tzinfo) -> str:
    """Best display name: the IANA key if there is one, else ``tzname``."""
    key = getattr(zone, "key", None)
    if isinstance(key, str):
        return key
    return zone.tzname(None) or str(zone)


# ---------------------------------------------------------------------------
# Locales
# ---------------------------------------------------------------------------


def locale_from_tag(tag: str) -> Locale:
    """Load a CLDR locale from a language tag such as ``en`` or ``he_IL``.

    ``_`` and ``-`` are both accepted as subtag separators, also mixed
    within one tag (``sr_Latn-RS``).
    """
    return Locale.parse(tag.replace("-", "_"))


def locale_from_tagged(obj: Any) -> Locale:
    """Load a locale from an object's ``language_tag``, via :func:`locale_from_tag`."""
    return locale_from_tag(language_tag_of(obj))


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------


def serialize_value(value: Any) -> Any:
    """JSON-friendly form of a coerced value.

    Datetimes become ISO 8601 strings, durations total seconds, zones their
    name and locales their CLDR identifier. Anything else passes through.
    """
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    if isinstance(value, tzinfo):
        return timezone_name(value)
    if isinstance(value, Locale):
        return str(value)
    return value
