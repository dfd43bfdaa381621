"""
Unit tests for dates module.
"""

from datetime import date, timedelta
import pytest

from ratecurves.dates import (
    DateUtils,
    serial_number,
    from_serial_number,
    parse_iso_date,
    format_iso_date,
)


class TestSerialNumbers:
    """Tests for date serial numbers."""

    def test_known_serials(self):
        assert serial_number(date(1899, 12, 30)) == 0
        assert serial_number(date(1900, 1, 1)) == 2
        assert serial_number(date(2024, 1, 1)) == 45292
        assert serial_number(date(2024, 1, 15)) == 45306

    def test_inverse(self):
        for d in (date(1901, 1, 1), date(2024, 2, 29), date(2199, 12, 31)):
            assert from_serial_number(serial_number(d)) == d

    def test_subtraction_is_day_count(self):
        d1 = date(2024, 1, 15)
        d2 = d1 + timedelta(days=400)
        assert serial_number(d2) - serial_number(d1) == 400


class TestIsoDates:
    """Tests for ISO date parsing and formatting."""

    def test_parse(self):
        assert parse_iso_date("2024-01-15") == date(2024, 1, 15)

    def test_parse_unpadded(self):
        assert parse_iso_date("2024-1-5") == date(2024, 1, 5)

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_iso_date("2024/01/15")
        with pytest.raises(ValueError):
            parse_iso_date("15-01-2024")
        with pytest.raises(ValueError):
            parse_iso_date("2024-02-30")

    def test_format_zero_pads(self):
        assert format_iso_date(date(2024, 1, 5)) == "2024-01-05"
        assert format_iso_date(date(2024, 12, 31)) == "2024-12-31"


class TestDateUtils:
    """Tests for DateUtils class."""

    def test_parse_tenor_months(self):
        """Test parsing month tenors."""
        assert DateUtils.parse_tenor("3M") == (3, 'M')
        assert DateUtils.parse_tenor("12M") == (12, 'M')

    def test_parse_tenor_years(self):
        """Test parsing year tenors."""
        assert DateUtils.parse_tenor("1Y") == (1, 'Y')
        assert DateUtils.parse_tenor("30Y") == (30, 'Y')

    def test_parse_tenor_lowercase(self):
        """Test parsing lowercase tenors."""
        assert DateUtils.parse_tenor("3m") == (3, 'M')
        assert DateUtils.parse_tenor("5y") == (5, 'Y')

    def test_parse_tenor_invalid(self):
        """Test invalid tenor raises error."""
        with pytest.raises(ValueError):
            DateUtils.parse_tenor("invalid")
        with pytest.raises(ValueError):
            DateUtils.parse_tenor("3X")

    def test_add_tenor_days_are_calendar_days(self):
        """Days are not business-day adjusted."""
        friday = date(2024, 1, 19)
        assert DateUtils.add_tenor(friday, "1D") == date(2024, 1, 20)

    def test_add_tenor_weeks(self):
        """Test adding week tenors."""
        base = date(2024, 1, 15)
        assert DateUtils.add_tenor(base, "1W") == date(2024, 1, 22)
        assert DateUtils.add_tenor(base, "2W") == date(2024, 1, 29)

    def test_add_tenor_months(self):
        """Test adding month tenors."""
        base = date(2024, 1, 15)
        assert DateUtils.add_tenor(base, "3M") == date(2024, 4, 15)
        assert DateUtils.add_tenor(base, "12M") == date(2025, 1, 15)

    def test_add_tenor_end_of_month(self):
        """Month end is clamped to the target month."""
        assert DateUtils.add_tenor(date(2024, 1, 31), "1M") == date(2024, 2, 29)
        assert DateUtils.add_tenor(date(2024, 2, 29), "1Y") == date(2025, 2, 28)

    def test_tenor_to_years(self):
        """Test converting tenor to years."""
        assert abs(DateUtils.tenor_to_years("1Y") - 1.0) < 1e-10
        assert abs(DateUtils.tenor_to_years("6M") - 0.5) < 1e-10
        assert abs(DateUtils.tenor_to_years("1W") - 7 / 365) < 1e-10
