"""
Day count, compounding and frequency conventions for curve queries.

Supported Day Counts:
- ACT/360: Actual days / 360 (money markets, OIS) - curve default
- ACT/365: Actual days / 365
- ACT/ACT: Actual days / actual days in year (ISDA split by calendar year)
- 30/360: 30 days per month / 360

Compounding and Frequency carry stable integer codes so a host can pass
plain integers across a binding boundary:

    Compounding: Simple=0, Compounded=1, Continuous=2, SimpleThenCompounded=3
    Frequency:   NoFrequency=-1, Once=0, Annual=1, Semiannual=2, ...,
                 Weekly=52, Daily=365
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum, IntEnum
from typing import Union
import calendar


class DayCount(Enum):
    """Day count convention enumeration."""
    ACT_360 = "ACT/360"
    ACT_365 = "ACT/365"
    ACT_ACT = "ACT/ACT"
    THIRTY_360 = "30/360"

    @classmethod
    def from_string(cls, s: str) -> "DayCount":
        """Parse day count from string representation."""
        mapping = {
            "ACT/360": cls.ACT_360,
            "ACT360": cls.ACT_360,
            "ACTUAL360": cls.ACT_360,
            "ACT/365": cls.ACT_365,
            "ACT365": cls.ACT_365,
            "ACT/365F": cls.ACT_365,
            "ACTUAL365FIXED": cls.ACT_365,
            "ACT/ACT": cls.ACT_ACT,
            "ACTACT": cls.ACT_ACT,
            "30/360": cls.THIRTY_360,
            "30360": cls.THIRTY_360,
            "THIRTY360": cls.THIRTY_360,
        }
        key = s.upper().replace(" ", "").replace("_", "")
        if key in mapping:
            return mapping[key]
        raise ValueError(f"Unknown day count convention: {s}")


class Compounding(IntEnum):
    """Interest rate compounding convention."""
    SIMPLE = 0
    COMPOUNDED = 1
    CONTINUOUS = 2
    SIMPLE_THEN_COMPOUNDED = 3

    @classmethod
    def coerce(cls, value: Union["Compounding", int, str]) -> "Compounding":
        """
        Accept an enum member, its integer code or its name.

        Names match case-insensitively with or without underscores, so
        "SimpleThenCompounded" and "simple_then_compounded" both work.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return _lookup_by_name(cls, value)
        return cls(int(value))


class Frequency(IntEnum):
    """Compounding/payment frequency as periods per year."""
    NO_FREQUENCY = -1
    ONCE = 0
    ANNUAL = 1
    SEMIANNUAL = 2
    EVERY_FOURTH_MONTH = 3
    QUARTERLY = 4
    BIMONTHLY = 6
    MONTHLY = 12
    EVERY_FOURTH_WEEK = 13
    BIWEEKLY = 26
    WEEKLY = 52
    DAILY = 365

    @classmethod
    def coerce(cls, value: Union["Frequency", int, str]) -> "Frequency":
        """Accept an enum member, its integer code or its name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return _lookup_by_name(cls, value)
        return cls(int(value))

    @property
    def is_periodic(self) -> bool:
        """True if the frequency can drive periodic compounding."""
        return self.value > 0


class Extrapolation(Enum):
    """Behaviour of a discount curve outside its first and last anchors."""
    FLAT_FORWARD = "FlatForward"  # continue the edge segment's log-linear slope
    FLAT_FACTOR = "FlatFactor"    # hold the edge discount factor
    NONE = "None"                 # raise ExtrapolationError


def _lookup_by_name(enum_cls, name: str):
    key = name.upper().replace("_", "").replace(" ", "")
    for member in enum_cls:
        if member.name.replace("_", "") == key:
            return member
    raise ValueError(f"Unknown {enum_cls.__name__}: {name}")


@dataclass
class CurveConventions:
    """
    Container for discount curve query conventions.

    Attributes:
        day_count: Day count used for zero/forward year fractions
        compounding: Default compounding for rate queries
        frequency: Default frequency for periodic compounding
        extrapolation: Policy outside the anchor range
    """
    day_count: DayCount = DayCount.ACT_360
    compounding: Compounding = Compounding.CONTINUOUS
    frequency: Frequency = Frequency.ANNUAL
    extrapolation: Extrapolation = Extrapolation.FLAT_FORWARD

    def __post_init__(self):
        if isinstance(self.day_count, str):
            self.day_count = DayCount.from_string(self.day_count)
        self.compounding = Compounding.coerce(self.compounding)
        self.frequency = Frequency.coerce(self.frequency)
        if isinstance(self.extrapolation, str):
            self.extrapolation = Extrapolation(self.extrapolation)

    @classmethod
    def actual_360(cls) -> "CurveConventions":
        """ACT/360 with continuous compounding (library default)."""
        return cls()

    @classmethod
    def usd_ois(cls) -> "CurveConventions":
        """Standard USD OIS quoting: ACT/360, annually compounded."""
        return cls(
            day_count=DayCount.ACT_360,
            compounding=Compounding.COMPOUNDED,
            frequency=Frequency.ANNUAL,
        )


def year_fraction(start: date, end: date, day_count: DayCount) -> float:
    """
    Calculate year fraction between two dates using specified day count convention.

    Args:
        start: Start date
        end: End date
        day_count: Day count convention

    Returns:
        Year fraction as float, 0.0 when start >= end

    Conventions:
        ACT/360: (end - start).days / 360
        ACT/365: (end - start).days / 365
        ACT/ACT: Days in each calendar year / days in that year
        30/360: Assumes 30 days per month, 360 days per year
    """
    if start >= end:
        return 0.0

    actual_days = (end - start).days

    if day_count == DayCount.ACT_360:
        return actual_days / 360.0

    elif day_count == DayCount.ACT_365:
        return actual_days / 365.0

    elif day_count == DayCount.ACT_ACT:
        total = 0.0
        current = start
        while current < end:
            next_year = date(current.year + 1, 1, 1)
            period_end = min(next_year, end)
            basis = 366 if calendar.isleap(current.year) else 365
            total += (period_end - current).days / basis
            current = period_end
        return total

    elif day_count == DayCount.THIRTY_360:
        # 30/360 US convention
        d1 = min(start.day, 30)
        d2 = end.day
        if d2 == 31 and d1 == 30:
            d2 = 30
        return (360 * (end.year - start.year) + 30 * (end.month - start.month) + (d2 - d1)) / 360.0

    else:
        raise ValueError(f"Unknown day count: {day_count}")


def days_in_year(d: date, day_count: DayCount) -> int:
    """
    Day basis of the convention at date d.

    Converts per-day rates into annual ones: 360 for ACT/360 and 30/360,
    365 for ACT/365, and the length of d's calendar year for ACT/ACT.
    """
    if day_count in (DayCount.ACT_360, DayCount.THIRTY_360):
        return 360
    if day_count == DayCount.ACT_365:
        return 365
    if day_count == DayCount.ACT_ACT:
        return 366 if calendar.isleap(d.year) else 365
    raise ValueError(f"Unknown day count: {day_count}")


__all__ = [
    "DayCount",
    "Compounding",
    "Frequency",
    "Extrapolation",
    "CurveConventions",
    "year_fraction",
    "days_in_year",
]
