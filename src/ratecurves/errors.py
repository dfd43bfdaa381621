"""
Error taxonomy for curve construction and queries.

Every failure raised by a curve is a CurveError subclass carrying an explicit
CurveErrorKind, so callers (and the string boundary adapter) can branch on
the kind instead of on message text:

- INSUFFICIENT_POINTS: build() with fewer than 2 anchors
- DUPLICATE_DATE: two anchors share a date
- NOT_BUILT: query before build() or after clear()
- INVALID_DATE_ORDER: forward_rate() with date1 >= date2
- INVALID_TIME_SPAN: year fraction <= 0 for a rate query
- INVALID_FREQUENCY: periodic compounding without a usable frequency
- NEGATIVE_TIME: RateCurve.add_point() with time < 0 in strict mode
- EXTRAPOLATION: query outside the anchors with extrapolation disabled
"""

from datetime import date
from enum import Enum
from typing import Optional


class CurveErrorKind(Enum):
    """Explicit error kinds reported by the curve engines."""
    INSUFFICIENT_POINTS = "InsufficientPoints"
    DUPLICATE_DATE = "DuplicateDate"
    NOT_BUILT = "NotBuilt"
    INVALID_DATE_ORDER = "InvalidDateOrder"
    INVALID_TIME_SPAN = "InvalidTimeSpan"
    INVALID_FREQUENCY = "InvalidFrequency"
    NEGATIVE_TIME = "NegativeTime"
    EXTRAPOLATION = "Extrapolation"


class CurveError(Exception):
    """Base exception for curve failures."""

    kind: CurveErrorKind

    def __init__(self, message: str):
        super().__init__(f"[{self.kind.value}] {message}")


class InsufficientPointsError(CurveError, ValueError):
    """Fewer anchors than required to build a curve."""

    kind = CurveErrorKind.INSUFFICIENT_POINTS

    def __init__(self, count: int, required: int = 2):
        self.count = count
        self.required = required
        super().__init__(
            f"Need at least {required} points to build curve, got {count}"
        )


class DuplicateDateError(CurveError, ValueError):
    """Two anchors share the same date."""

    kind = CurveErrorKind.DUPLICATE_DATE

    def __init__(self, duplicate: date):
        self.date = duplicate
        super().__init__(f"Duplicate anchor date: {duplicate.isoformat()}")


class NotBuiltError(CurveError, RuntimeError):
    """Curve queried before build() succeeded."""

    kind = CurveErrorKind.NOT_BUILT

    def __init__(self, message: str = "Curve not built - add points and call build()"):
        super().__init__(message)


class InvalidDateOrderError(CurveError, ValueError):
    """Start date not strictly before end date."""

    kind = CurveErrorKind.INVALID_DATE_ORDER

    def __init__(self, start: date, end: date):
        self.start = start
        self.end = end
        super().__init__(
            f"Start date {start.isoformat()} must be before end date {end.isoformat()}"
        )


class InvalidTimeSpanError(CurveError, ValueError):
    """Non-positive year fraction for a rate calculation."""

    kind = CurveErrorKind.INVALID_TIME_SPAN

    def __init__(self, tau: float, detail: Optional[str] = None):
        self.tau = tau
        message = f"Year fraction must be positive, got {tau}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class InvalidFrequencyError(CurveError, ValueError):
    """Periodic compounding requested without a usable frequency."""

    kind = CurveErrorKind.INVALID_FREQUENCY

    def __init__(self, compounding, frequency):
        self.compounding = compounding
        self.frequency = frequency
        super().__init__(
            f"Frequency {getattr(frequency, 'name', frequency)} not allowed "
            f"with {getattr(compounding, 'name', compounding)} compounding"
        )


class NegativeTimeError(CurveError, ValueError):
    """Negative time coordinate added to a strict RateCurve."""

    kind = CurveErrorKind.NEGATIVE_TIME

    def __init__(self, time: float):
        self.time = time
        super().__init__(f"Time must be non-negative, got {time}")


class ExtrapolationError(CurveError, ValueError):
    """Query outside the anchor range with extrapolation disabled."""

    kind = CurveErrorKind.EXTRAPOLATION

    def __init__(self, requested: date, first: date, last: date):
        self.requested = requested
        self.first = first
        self.last = last
        super().__init__(
            f"Date {requested.isoformat()} outside curve range "
            f"[{first.isoformat()}, {last.isoformat()}]"
        )


__all__ = [
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
]
