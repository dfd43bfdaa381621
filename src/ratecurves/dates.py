"""
Date utilities for curve construction.

Provides:
- Serial numbers (days since 1899-12-30) for ordering and day counts
- ISO-8601 YYYY-MM-DD parsing and formatting
- Tenor parsing and calendar tenor arithmetic (no business-day adjustment)
"""

from datetime import date, timedelta
from typing import Tuple
import calendar
import re


SERIAL_EPOCH = date(1899, 12, 30)

_ISO_PATTERN = re.compile(r'^\s*(\d{4})-(\d{1,2})-(\d{1,2})\s*$')


def serial_number(d: date) -> int:
    """
    Days since 1899-12-30.

    The mapping is monotonic, so serial subtraction equals the actual
    day count between two dates.
    """
    return d.toordinal() - SERIAL_EPOCH.toordinal()


def from_serial_number(serial: int) -> date:
    """Inverse of serial_number."""
    return date.fromordinal(SERIAL_EPOCH.toordinal() + int(serial))


def parse_iso_date(s: str) -> date:
    """
    Parse a YYYY-MM-DD string.

    Month and day may be given without zero padding ("2024-1-5").

    Raises:
        ValueError: If the string is not a valid calendar date
    """
    match = _ISO_PATTERN.match(s)
    if not match:
        raise ValueError(f"Invalid ISO date: {s!r}. Expected format 'YYYY-MM-DD'")
    year, month, day = (int(g) for g in match.groups())
    return date(year, month, day)


def format_iso_date(d: date) -> str:
    """Format as YYYY-MM-DD with zero-padded month and day."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


class DateUtils:
    """Utility class for tenor arithmetic."""

    # Tenor regex pattern: number + unit (D/W/M/Y)
    TENOR_PATTERN = re.compile(r'^(\d+)([DWMY])$', re.IGNORECASE)

    @staticmethod
    def parse_tenor(tenor: str) -> Tuple[int, str]:
        """
        Parse a tenor string into (amount, unit).

        Args:
            tenor: Tenor string like "1D", "3M", "2Y"

        Returns:
            Tuple of (amount, unit) where unit is D/W/M/Y

        Raises:
            ValueError: If tenor format is invalid
        """
        match = DateUtils.TENOR_PATTERN.match(tenor.upper().strip())
        if not match:
            raise ValueError(f"Invalid tenor format: {tenor}. Expected format like '3M', '2Y'")

        return int(match.group(1)), match.group(2).upper()

    @staticmethod
    def add_tenor(start: date, tenor: str) -> date:
        """
        Add a tenor to a date using calendar arithmetic.

        Days and weeks are calendar days. Months and years keep the day of
        month, clamped to the last day of the target month.
        """
        amount, unit = DateUtils.parse_tenor(tenor)

        if unit == 'D':
            return start + timedelta(days=amount)
        elif unit == 'W':
            return start + timedelta(weeks=amount)
        elif unit == 'M':
            year = start.year + (start.month + amount - 1) // 12
            month = (start.month + amount - 1) % 12 + 1
        elif unit == 'Y':
            year = start.year + amount
            month = start.month
        else:
            raise ValueError(f"Unknown tenor unit: {unit}")

        day = min(start.day, calendar.monthrange(year, month)[1])
        return date(year, month, day)

    @staticmethod
    def tenor_to_years(tenor: str) -> float:
        """
        Convert tenor to approximate year fraction.

        Args:
            tenor: Tenor string

        Returns:
            Approximate years as float
        """
        amount, unit = DateUtils.parse_tenor(tenor)

        if unit == 'D':
            return amount / 365.0
        elif unit == 'W':
            return amount * 7 / 365.0
        elif unit == 'M':
            return amount / 12.0
        return float(amount)


__all__ = [
    "SERIAL_EPOCH",
    "serial_number",
    "from_serial_number",
    "parse_iso_date",
    "format_iso_date",
    "DateUtils",
]
