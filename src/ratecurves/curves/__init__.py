"""
Curves package - curve construction and rate queries.

Provides:
- DiscountCurve: Date-indexed discount factors, log-linear interpolation
- RateCurve: Time-indexed zero rates, linear interpolation
- Interpolators shared by both
- Compounding conversions between rates and discount factors
"""

from .discount_curve import CurveAnchor, DiscountCurve
from .rate_curve import RateCurve
from .interpolation import (
    Interpolator,
    LinearInterpolator,
    LogLinearInterpolator,
    create_interpolator,
)
from .compounding import (
    implied_rate,
    rate_from_discount,
    compound_factor,
    discount_factor_from_rate,
    calculate_discount_factor,
)
from .locking import ReadWriteLock

__all__ = [
    "CurveAnchor",
    "DiscountCurve",
    "RateCurve",
    "Interpolator",
    "LinearInterpolator",
    "LogLinearInterpolator",
    "create_interpolator",
    "implied_rate",
    "rate_from_discount",
    "compound_factor",
    "discount_factor_from_rate",
    "calculate_discount_factor",
    "ReadWriteLock",
]
