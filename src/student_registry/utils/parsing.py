"""Parsing of dates and integers typed at the console."""

import re
from datetime import date

from ..core.errors import FormatError

# 15.05.2000, 15/5/2000, 15-05-2000, "15 . 05 . 2000"
_DAY_FIRST = re.compile(r"^(\d{1,2})\s*([./-])\s*(\d{1,2})\s*\2\s*(\d{4})$")
# 2000-05-15
_ISO = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_INTEGER = re.compile(r"^[+-]?\d+$")


def parse_date(text: str) -> date:
    """Parse a day-month-year or ISO year-month-day date.

    Handles:
    - Day first with ".", "/" or "-" separators (e.g., "15.05.2000", "1/2/1999")
    - ISO format (e.g., "2000-05-15")

    Args:
        text: Date as typed by the user

    Returns:
        The parsed date

    Raises:
        FormatError: If the text is blank, matches neither layout or names a
            day that does not exist
    """
    value = (text or "").strip()
    if not value:
        raise FormatError("Date is empty")

    match = _ISO.match(value)
    if match:
        year, month, day = (int(group) for group in match.groups())
    else:
        match = _DAY_FIRST.match(value)
        if not match:
            raise FormatError(f"Unrecognised date: {value!r}")
        day, month, year = int(match.group(1)), int(match.group(3)), int(match.group(4))

    return build_date(year, month, day)


def build_date(year: int, month: int, day: int) -> date:
    """Build a date from its parts, raising FormatError for impossible days."""
    try:
        return date(year, month, day)
    except ValueError as e:
        raise FormatError(f"Invalid date {day:02d}.{month:02d}.{year}: {e}") from e


def parse_integer(text: str) -> int:
    """Parse a base-10 integer with an optional sign.

    Raises:
        FormatError: If the text is not an integer
    """
    value = (text or "").strip()
    if not _INTEGER.match(value):
        raise FormatError(f"Not a whole number: {value!r}")
    return int(value)
