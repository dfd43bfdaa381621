"""
Unit tests for conventions module.
"""

from datetime import date
import pytest

from ratecurves.conventions import (
    DayCount,
    Compounding,
    Frequency,
    Extrapolation,
    CurveConventions,
    year_fraction,
    days_in_year,
)


class TestDayCount:
    """Tests for day count conventions."""

    def test_act_360(self):
        """Test ACT/360 day count."""
        start = date(2024, 1, 15)
        end = date(2024, 4, 15)  # 91 days

        yf = year_fraction(start, end, DayCount.ACT_360)
        expected = 91 / 360

        assert abs(yf - expected) < 1e-10

    def test_act_365(self):
        """Test ACT/365 day count."""
        start = date(2024, 1, 15)
        end = date(2024, 4, 15)  # 91 days

        yf = year_fraction(start, end, DayCount.ACT_365)
        expected = 91 / 365

        assert abs(yf - expected) < 1e-10

    def test_act_act_calendar_year(self):
        """A full calendar year is exactly one year under ACT/ACT."""
        assert abs(year_fraction(date(2023, 1, 1), date(2024, 1, 1), DayCount.ACT_ACT) - 1.0) < 1e-12
        assert abs(year_fraction(date(2024, 1, 1), date(2025, 1, 1), DayCount.ACT_ACT) - 1.0) < 1e-12

    def test_act_act_across_years(self):
        """Test ACT/ACT splits by calendar year."""
        start = date(2024, 1, 15)
        end = date(2025, 1, 15)

        yf = year_fraction(start, end, DayCount.ACT_ACT)
        expected = 352 / 366 + 14 / 365

        assert abs(yf - expected) < 1e-12

    def test_thirty_360(self):
        """Test 30/360 day count."""
        start = date(2024, 1, 15)
        end = date(2024, 4, 15)  # 3 months

        yf = year_fraction(start, end, DayCount.THIRTY_360)
        expected = 90 / 360  # 3 months * 30 days

        assert abs(yf - expected) < 1e-10

    def test_year_fraction_same_date(self):
        """Test year fraction for same date returns 0."""
        d = date(2024, 1, 15)
        yf = year_fraction(d, d, DayCount.ACT_360)
        assert yf == 0.0

    def test_year_fraction_reversed_dates(self):
        """Reversed dates give 0, not a negative fraction."""
        assert year_fraction(date(2024, 6, 1), date(2024, 1, 1), DayCount.ACT_360) == 0.0

    def test_from_string(self):
        """Test parsing day count names."""
        assert DayCount.from_string("act/360") == DayCount.ACT_360
        assert DayCount.from_string("Actual360") == DayCount.ACT_360
        assert DayCount.from_string("ACT/365F") == DayCount.ACT_365
        assert DayCount.from_string("30/360") == DayCount.THIRTY_360
        with pytest.raises(ValueError):
            DayCount.from_string("BUS/252")

    def test_days_in_year(self):
        """Day basis used to annualise per-day rates."""
        assert days_in_year(date(2024, 3, 1), DayCount.ACT_360) == 360
        assert days_in_year(date(2024, 3, 1), DayCount.THIRTY_360) == 360
        assert days_in_year(date(2024, 3, 1), DayCount.ACT_365) == 365
        assert days_in_year(date(2024, 3, 1), DayCount.ACT_ACT) == 366
        assert days_in_year(date(2025, 3, 1), DayCount.ACT_ACT) == 365


class TestEnumCodes:
    """Compounding and frequency integer codes and coercion."""

    def test_compounding_codes(self):
        assert int(Compounding.SIMPLE) == 0
        assert int(Compounding.COMPOUNDED) == 1
        assert int(Compounding.CONTINUOUS) == 2
        assert int(Compounding.SIMPLE_THEN_COMPOUNDED) == 3

    def test_frequency_codes(self):
        assert int(Frequency.NO_FREQUENCY) == -1
        assert int(Frequency.ONCE) == 0
        assert int(Frequency.SEMIANNUAL) == 2
        assert int(Frequency.EVERY_FOURTH_WEEK) == 13
        assert int(Frequency.DAILY) == 365

    def test_coerce_from_int_and_name(self):
        assert Compounding.coerce(2) is Compounding.CONTINUOUS
        assert Compounding.coerce("SimpleThenCompounded") is Compounding.SIMPLE_THEN_COMPOUNDED
        assert Compounding.coerce(Compounding.SIMPLE) is Compounding.SIMPLE
        assert Frequency.coerce("Semiannual") is Frequency.SEMIANNUAL
        assert Frequency.coerce("NoFrequency") is Frequency.NO_FREQUENCY
        assert Frequency.coerce(12) is Frequency.MONTHLY

    def test_coerce_unknown(self):
        with pytest.raises(ValueError):
            Frequency.coerce(5)
        with pytest.raises(ValueError):
            Compounding.coerce("Exponential")

    def test_is_periodic(self):
        assert Frequency.ANNUAL.is_periodic
        assert not Frequency.ONCE.is_periodic
        assert not Frequency.NO_FREQUENCY.is_periodic


class TestCurveConventions:
    """Tests for convention presets."""

    def test_default_preset(self):
        conv = CurveConventions.actual_360()
        assert conv.day_count == DayCount.ACT_360
        assert conv.compounding == Compounding.CONTINUOUS
        assert conv.extrapolation == Extrapolation.FLAT_FORWARD

    def test_usd_ois_preset(self):
        """Test USD OIS conventions."""
        conv = CurveConventions.usd_ois()
        assert conv.day_count == DayCount.ACT_360
        assert conv.compounding == Compounding.COMPOUNDED
        assert conv.frequency == Frequency.ANNUAL

    def test_string_and_int_inputs(self):
        conv = CurveConventions(
            day_count="ACT/365",
            compounding=1,
            frequency="Quarterly",
            extrapolation="FlatFactor",
        )
        assert conv.day_count == DayCount.ACT_365
        assert conv.compounding is Compounding.COMPOUNDED
        assert conv.frequency is Frequency.QUARTERLY
        assert conv.extrapolation == Extrapolation.FLAT_FACTOR
