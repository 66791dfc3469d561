"""Tests for the error taxonomy."""

import pytest

from chronotypes.domain.errors import (
    ChronoTypesError,
    CoercionError,
    ConversionFailedError,
    NoApplicableRuleError,
    UnknownTypeError,
    library_message,
)
from chronotypes.domain.types import CoercionReason


class TestUnknownTypeError:
    def test_is_lookup_error(self) -> None:
        err = UnknownTypeError("NoSuchType")
        assert isinstance(err, LookupError)
        assert isinstance(err, ChronoTypesError)

    def test_message_names_type(self) -> None:
        err = UnknownTypeError("NoSuchType")
        assert err.type_name == "NoSuchType"
        assert "NoSuchType" in str(err)


class TestNoApplicableRuleError:
    def test_reason_and_fields(self) -> None:
        err = NoApplicableRuleError("DateTimeValue", "later")
        assert err.reason is CoercionReason.NO_APPLICABLE_RULE
        assert err.type_name == "DateTimeValue"
        assert err.value == "later"
        assert "'later'" in err.message

    def test_is_value_error(self) -> None:
        assert isinstance(NoApplicableRuleError("Duration", None), ValueError)


class TestConversionFailedError:
    def test_message_is_library_message_unchanged(self) -> None:
        cause = KeyError("No time zone found with key Not/AZone")
        err = ConversionFailedError("TimeZone", "Not/AZone", cause)
        assert err.reason is CoercionReason.CONVERSION_FAILED
        assert err.message == "No time zone found with key Not/AZone"
        assert err.cause is cause

    @pytest.mark.parametrize(
        "cause,message",
        [
            (KeyError("missing"), "missing"),
            (KeyError(("a", 1)), "('a', 1)"),
            (KeyError(), ""),
            (ValueError("month must be in 1..12"), "month must be in 1..12"),
            (TypeError("bad", "args"), "('bad', 'args')"),
        ],
    )
    def test_library_message(self, cause: BaseException, message: str) -> None:
        assert library_message(cause) == message

    def test_to_detail(self) -> None:
        err = ConversionFailedError("Duration", {"months": 1}, TypeError("bad keyword"))
        detail = err.to_detail()
        assert detail == {
            "type_name": "Duration",
            "reason": "conversion_failed",
            "input_type": "dict",
            "input": "{'months': 1}",
        }


@pytest.mark.parametrize("cls", [NoApplicableRuleError, ConversionFailedError])
def test_coercion_errors_share_base(cls: type) -> None:
    assert issubclass(cls, CoercionError)
