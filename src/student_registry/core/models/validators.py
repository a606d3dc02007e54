"""Validation functions for data models."""

from datetime import date
from typing import Any

MIN_ADMISSION_YEAR = 1900


def to_str(value: Any) -> str:
    """Convert value to string and strip whitespace. ``None`` becomes ``""``."""
    if value is None:
        return ""
    return str(value).strip()


def require_text(value: str) -> str:
    """Reject strings that are empty after stripping."""
    if not value:
        raise ValueError("must not be blank")
    return value


def not_in_future(value: date) -> date:
    """Reject dates later than today."""
    today = date.today()
    if value > today:
        raise ValueError(f"{value.isoformat()} is later than today ({today.isoformat()})")
    return value


def admission_year_in_range(value: int) -> int:
    """Keep admission years between MIN_ADMISSION_YEAR and the current year."""
    current_year = date.today().year
    if not MIN_ADMISSION_YEAR <= value <= current_year:
        raise ValueError(
            f"{value} is outside the allowed range {MIN_ADMISSION_YEAR}-{current_year}"
        )
    return value
