#!/usr/bin/env python3
"""
Tests for console value parsing.
"""

import sys
import os
from datetime import date

# Add the src directory to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest
from student_registry.core.errors import FormatError
from student_registry.utils.parsing import build_date, parse_date, parse_integer


class TestParseDate:
    """Tests for date parsing."""

    def test_day_first_separators(self):
        """Test dotted, slashed and dashed day-first dates."""
        assert parse_date("15.05.2000") == date(2000, 5, 15)
        assert parse_date("15/05/2000") == date(2000, 5, 15)
        assert parse_date("15-05-2000") == date(2000, 5, 15)

    def test_single_digit_parts(self):
        """Test day and month without leading zeros."""
        assert parse_date("1.2.1999") == date(1999, 2, 1)

    def test_iso_format(self):
        """Test year-month-day dates."""
        assert parse_date("2000-05-15") == date(2000, 5, 15)

    def test_surrounding_whitespace(self):
        """Test whitespace around the date and its separators."""
        assert parse_date("  15 . 05 . 2000 \n") == date(2000, 5, 15)

    @pytest.mark.parametrize("text", ["", "   ", None, "yesterday", "15.05", "15.05/2000", "2000/05/15x"])
    def test_unparsable(self, text):
        """Test text that is not a date."""
        with pytest.raises(FormatError):
            parse_date(text)

    def test_impossible_day(self):
        """Test a well-formed but non-existent day."""
        with pytest.raises(FormatError, match="Invalid date"):
            parse_date("31.02.2001")
        with pytest.raises(FormatError):
            parse_date("2001-13-01")

    def test_format_error_is_value_error(self):
        """Test that callers may treat format errors as value errors."""
        with pytest.raises(ValueError):
            parse_date("nope")


class TestBuildDate:
    """Tests for building dates from parts."""

    def test_valid(self):
        assert build_date(2024, 2, 29) == date(2024, 2, 29)

    def test_invalid(self):
        with pytest.raises(FormatError):
            build_date(2023, 2, 29)


class TestParseInteger:
    """Tests for integer parsing."""

    def test_plain_and_signed(self):
        """Test base-10 integers with an optional sign."""
        assert parse_integer("2019") == 2019
        assert parse_integer(" -5 ") == -5
        assert parse_integer("+7") == 7

    @pytest.mark.parametrize("text", ["", "twenty", "20.5", "1_000", "0x10", "12 3"])
    def test_rejected(self, text):
        """Test text that is not a plain integer."""
        with pytest.raises(FormatError):
            parse_integer(text)
