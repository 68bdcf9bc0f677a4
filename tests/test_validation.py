"""Tests for log_retrieval/validation.py"""

from datetime import date

import pytest

from log_retrieval.validation import ValidationError, parse_date, validate_date, validate_log_id

TODAY = date(2024, 1, 15)


class TestValidateLogId:
    @pytest.mark.parametrize("value", ["abc", "req-123", "a_b.c", "A1-b2_C3.d4"])
    def test_valid(self, value):
        assert validate_log_id(value) == value

    @pytest.mark.parametrize("value,message", [
        ("", "Log ID is required"),
        ("   ", "Log ID is required"),
        ("log@id#123", "Invalid log ID format"),
        ("log id 123", "Invalid log ID format"),
        ("../etc/passwd", "Invalid log ID format"),
        ("x" * 101, "Log ID is too long"),
    ])
    def test_invalid(self, value, message):
        with pytest.raises(ValidationError, match=message):
            validate_log_id(value)

    def test_max_length_accepted(self):
        assert validate_log_id("x" * 100)


class TestValidateDate:
    def test_valid(self):
        assert validate_date("2024-01-10", TODAY) == date(2024, 1, 10)

    def test_tomorrow_allowed(self):
        assert validate_date("2024-01-16", TODAY) == date(2024, 1, 16)

    def test_day_after_tomorrow_rejected(self):
        with pytest.raises(ValidationError, match="out of valid range"):
            validate_date("2024-01-17", TODAY)

    def test_too_old_rejected(self):
        with pytest.raises(ValidationError, match="out of valid range"):
            validate_date("2019-01-14", TODAY)

    def test_five_years_ago_allowed(self):
        assert validate_date("2019-01-15", TODAY) == date(2019, 1, 15)

    def test_leap_day_today(self):
        assert validate_date("2019-02-28", date(2024, 2, 29)) == date(2019, 2, 28)

    @pytest.mark.parametrize("value", ["2024/01/15", "15-01-2024", "2024-13-01", "yesterday"])
    def test_bad_format(self, value):
        with pytest.raises(ValidationError, match="Expected YYYY-MM-DD"):
            validate_date(value, TODAY)

    def test_empty(self):
        with pytest.raises(ValidationError, match="Date is required"):
            validate_date(" ", TODAY)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_date("nope")
