"""
String/integer boundary over the curve engines.

Hosts that cannot pass date objects or enum members talk to the engine
through this module: dates travel as ISO-8601 "YYYY-MM-DD" strings and
compounding/frequency as their integer codes (see conventions).
"""

from datetime import date
from typing import Union

from .conventions import Compounding, DayCount, Extrapolation, Frequency
from .curves.discount_curve import DiscountCurve
from .dates import format_iso_date, parse_iso_date


def date_to_iso_string(d: date) -> str:
    """Format a date as zero-padded YYYY-MM-DD."""
    return format_iso_date(d)


def date_from_iso_string(s: str) -> date:
    """Parse YYYY-MM-DD into a date."""
    return parse_iso_date(s)


class IsoDiscountCurve:
    """
    DiscountCurve addressed by ISO date strings and integer enum codes.

    Example:
        >>> curve = IsoDiscountCurve()
        >>> curve.add_point("2024-01-15", 1.0)
        >>> curve.add_point("2025-01-15", 0.95)
        >>> curve.build()
        >>> round(curve.discount("2025-01-15"), 2)
        0.95
    """

    def __init__(
        self,
        day_count: Union[DayCount, str] = DayCount.ACT_360,
        reference_date: Union[str, date, None] = None,
        extrapolation: Union[Extrapolation, str] = Extrapolation.FLAT_FORWARD,
        compounding: int = Compounding.CONTINUOUS,
        frequency: int = Frequency.ANNUAL,
    ):
        if isinstance(reference_date, str):
            reference_date = parse_iso_date(reference_date)
        self.curve = DiscountCurve(
            day_count=day_count,
            reference_date=reference_date,
            extrapolation=extrapolation,
            compounding=Compounding.coerce(compounding),
            frequency=Frequency.coerce(frequency),
        )

    def add_point(self, date_str: str, discount_factor: float) -> None:
        self.curve.add_point(parse_iso_date(date_str), discount_factor)

    def build(self) -> None:
        self.curve.build()

    def discount(self, date_str: str) -> float:
        return self.curve.discount(parse_iso_date(date_str))

    def zero_rate(self, date_str: str, compounding: int, frequency: int) -> float:
        return self.curve.zero_rate(
            parse_iso_date(date_str),
            Compounding.coerce(compounding),
            Frequency.coerce(frequency),
        )

    def forward_rate(
        self, date1_str: str, date2_str: str, compounding: int, frequency: int
    ) -> float:
        return self.curve.forward_rate(
            parse_iso_date(date1_str),
            parse_iso_date(date2_str),
            Compounding.coerce(compounding),
            Frequency.coerce(frequency),
        )

    def clear(self) -> None:
        self.curve.clear()

    def get_point_count(self) -> int:
        return self.curve.get_point_count()


__all__ = [
    "date_to_iso_string",
    "date_from_iso_string",
    "IsoDiscountCurve",
]
