"""
ratecurves: Discount and Zero Rate Curve Engine

A small library for:
- Building date-indexed discount curves with log-linear interpolation
- Querying discount factors, zero rates and forward rates under a day count,
  compounding rule and frequency
- Lightweight time-indexed zero rate curves with linear interpolation

Scope: curve representation, interpolation and rate derivation only; no
bootstrapping, calendars or pricing.
"""

__version__ = "0.1.0"

# Conventions
from .conventions import (
    DayCount,
    Compounding,
    Frequency,
    Extrapolation,
    CurveConventions,
    year_fraction,
    days_in_year,
)
from .dates import (
    DateUtils,
    serial_number,
    from_serial_number,
    parse_iso_date,
    format_iso_date,
)

# Errors
from .errors import (
    CurveErrorKind,
    CurveError,
    InsufficientPointsError,
    DuplicateDateError,
    NotBuiltError,
    InvalidDateOrderError,
    InvalidTimeSpanError,
    InvalidFrequencyError,
    NegativeTimeError,
    ExtrapolationError,
)

# Curves
from .curves import (
    DiscountCurve,
    RateCurve,
    LinearInterpolator,
    LogLinearInterpolator,
    implied_rate,
    compound_factor,
    calculate_discount_factor,
)

# Boundary
from .boundary import IsoDiscountCurve, date_to_iso_string, date_from_iso_string

__all__ = [
    # Version
    "__version__",
    # Conventions
    "DayCount",
    "Compounding",
    "Frequency",
    "Extrapolation",
    "CurveConventions",
    "year_fraction",
    "days_in_year",
    # Dates
    "DateUtils",
    "serial_number",
    "from_serial_number",
    "parse_iso_date",
    "format_iso_date",
    # Errors
    "CurveErrorKind",
    "CurveError",
    "InsufficientPointsError",
    "DuplicateDateError",
    "NotBuiltError",
    "InvalidDateOrderError",
    "InvalidTimeSpanError",
    "InvalidFrequencyError",
    "NegativeTimeError",
    "ExtrapolationError",
    # Curves
    "DiscountCurve",
    "RateCurve",
    "LinearInterpolator",
    "LogLinearInterpolator",
    "implied_rate",
    "compound_factor",
    "calculate_discount_factor",
    # Boundary
    "IsoDiscountCurve",
    "date_to_iso_string",
    "date_from_iso_string",
]
