"""Tests for the date/time library adapters."""

from datetime import UTC, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from babel import Locale

from chronotypes.infrastructure.adapters import (
    locale_from_tag,
    parse_offset,
    serialize_value,
    timezone_from_string,
    timezone_name,
)


class TestParseOffset:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("+00", timedelta(0)),
            ("+0200", timedelta(hours=2)),
            ("+02:00", timedelta(hours=2)),
            ("-0930", -timedelta(hours=9, minutes=30)),
            ("+023015", timedelta(hours=2, minutes=30, seconds=15)),
        ],
    )
    def test_offsets(self, text: str, expected: timedelta) -> None:
        assert parse_offset(text) == expected

    @pytest.mark.parametrize("text", ["UTC", "Europe/Paris", "0200", "+2", "+02:0", "local"])
    def test_not_offsets(self, text: str) -> None:
        assert parse_offset(text) is None


class TestTimezoneName:
    def test_zoneinfo_key(self) -> None:
        assert timezone_name(ZoneInfo("America/New_York")) == "America/New_York"

    def test_fixed_offset_name(self) -> None:
        assert timezone_name(timezone_from_string("+0530")) == "+0530"

    def test_unnamed_fixed_offset(self) -> None:
        assert timezone_name(timezone(timedelta(hours=1))) == "UTC+01:00"


class TestLocaleFromTag:
    def test_underscore(self) -> None:
        assert locale_from_tag("pt_BR") == Locale("pt", territory="BR")

    def test_hyphen(self) -> None:
        assert locale_from_tag("pt-BR") == Locale("pt", territory="BR")


class TestSerializeValue:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (datetime(2008, 3, 1, tzinfo=UTC), "2008-03-01T00:00:00+00:00"),
            (timedelta(days=1), 86400.0),
            (ZoneInfo("Africa/Timbuktu"), "Africa/Timbuktu"),
            (Locale("he", territory="IL"), "he_IL"),
            ("now", "now"),
            (3, 3),
        ],
    )
    def test_values(self, value: object, expected: object) -> None:
        assert serialize_value(value) == expected
