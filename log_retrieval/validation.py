"""Validation of user-supplied log ids and dates."""

import re
from datetime import date, datetime, timedelta

LOG_ID_PATTERN = re.compile(r"^[a-zA-Z0-9\-_.]+$")
MAX_LOG_ID_LENGTH = 100
MAX_DATE_AGE_YEARS = 5


class ValidationError(ValueError):
    pass


def validate_log_id(log_id: str) -> str:
    if not log_id or not log_id.strip():
        raise ValidationError("Log ID is required")
    if len(log_id) > MAX_LOG_ID_LENGTH:
        raise ValidationError(
            f"Log ID is too long. Maximum length is {MAX_LOG_ID_LENGTH} characters"
        )
    if not LOG_ID_PATTERN.match(log_id):
        raise ValidationError(
            "Invalid log ID format. Only alphanumeric characters, hyphens, "
            "underscores, and dots are allowed"
        )
    return log_id


def parse_date(value: str) -> date:
    """Parse YYYY-MM-DD. Raises ValidationError."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError("Invalid date format. Expected YYYY-MM-DD") from None


def validate_date(value: str, today: date) -> date:
    """Parse value and check it lies between 5 years ago and tomorrow."""
    if not value or not value.strip():
        raise ValidationError("Date is required")

    parsed = parse_date(value)

    try:
        earliest = today.replace(year=today.year - MAX_DATE_AGE_YEARS)
    except ValueError:
        # Feb 29 in a non-leap target year.
        earliest = today.replace(year=today.year - MAX_DATE_AGE_YEARS, day=28)
    latest = today + timedelta(days=1)

    if parsed < earliest or parsed > latest:
        raise ValidationError(
            "Date is out of valid range. Please provide a date within the last 5 years"
        )
    return parsed
