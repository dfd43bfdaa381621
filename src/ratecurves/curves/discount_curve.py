"""
Date-indexed discount factor curve.

The DiscountCurve provides:
- Discount factor P(d) by log-linear interpolation between anchors
- Zero rate from the reference date under a day count and compounding rule
- Forward rate between two dates, and a daily overnight forward series
- Instantaneous forward rate from the slope of log P

Anchors are accumulated with add_point() in any order and take effect at
build(). Interpolation runs on date serial numbers, so the weight between two
anchors is a ratio of actual days regardless of the configured day count.
The day count only enters the year fractions of zero and forward rates
and the annualisation of the instantaneous forward.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple, Union
import logging

import numpy as np
import pandas as pd

from ..conventions import (
    Compounding,
    CurveConventions,
    DayCount,
    days_in_year,
    Extrapolation,
    Frequency,
    year_fraction,
)
from ..dates import DateUtils, serial_number
from ..errors import (
    DuplicateDateError,
    ExtrapolationError,
    InsufficientPointsError,
    InvalidDateOrderError,
    NotBuiltError,
)
from .compounding import rate_from_discount
from .interpolation import LogLinearInterpolator, create_interpolator
from .locking import ReadWriteLock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveAnchor:
    """A single (date, discount factor) point on the curve."""
    date: date
    discount_factor: float

    @property
    def serial(self) -> int:
        return serial_number(self.date)


def _as_date(d: Union[date, datetime]) -> date:
    return d.date() if isinstance(d, datetime) else d


class DiscountCurve:
    """
    Discount curve with log-linear interpolation.

    Attributes:
        day_count: Day count for zero/forward year fractions
        extrapolation: Policy outside [first anchor, last anchor]
        compounding: Default compounding for rate queries
        frequency: Default frequency for rate queries

    Conventions:
        - Reference date is the explicit reference_date if given, otherwise
          the earliest anchor
        - Discount factors are not checked for monotonicity or sign; odd
          values only produce a logged warning at build()
        - Points added after build() are picked up by the next build();
          until then queries answer from the last built anchor set
    """

    def __init__(
        self,
        day_count: Union[DayCount, str] = DayCount.ACT_360,
        reference_date: Optional[date] = None,
        extrapolation: Extrapolation = Extrapolation.FLAT_FORWARD,
        compounding: Union[Compounding, int, str] = Compounding.CONTINUOUS,
        frequency: Union[Frequency, int, str] = Frequency.ANNUAL,
    ):
        if isinstance(day_count, str):
            day_count = DayCount.from_string(day_count)
        if isinstance(extrapolation, str):
            extrapolation = Extrapolation(extrapolation)
        self.day_count = day_count
        self.extrapolation = extrapolation
        self.compounding = Compounding.coerce(compounding)
        self.frequency = Frequency.coerce(frequency)
        self._reference_date = _as_date(reference_date) if reference_date else None

        self._anchors: List[CurveAnchor] = []
        self._built_anchors: Tuple[CurveAnchor, ...] = ()
        self._interpolator: Optional[LogLinearInterpolator] = None
        self._lock = ReadWriteLock()

    @classmethod
    def from_conventions(
        cls,
        conventions: CurveConventions,
        reference_date: Optional[date] = None,
    ) -> "DiscountCurve":
        """Create an empty curve configured from a CurveConventions preset."""
        return cls(
            day_count=conventions.day_count,
            reference_date=reference_date,
            extrapolation=conventions.extrapolation,
            compounding=conventions.compounding,
            frequency=conventions.frequency,
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_point(self, d: date, discount_factor: float) -> None:
        """
        Add a discount factor anchor.

        Args:
            d: Anchor date
            discount_factor: Discount factor P(d)
        """
        with self._lock.write():
            self._anchors.append(CurveAnchor(_as_date(d), float(discount_factor)))

    def add_point_tenor(self, tenor: str, discount_factor: float) -> date:
        """
        Add an anchor at reference_date + tenor.

        Returns:
            The anchor date
        """
        if self._reference_date is None:
            raise ValueError("add_point_tenor requires an explicit reference_date")
        d = DateUtils.add_tenor(self._reference_date, tenor)
        self.add_point(d, discount_factor)
        return d

    def build(self) -> None:
        """
        Sort the anchors and prepare the curve for queries.

        Raises:
            InsufficientPointsError: Fewer than 2 anchors
            DuplicateDateError: Two anchors share a date

        A failed build leaves the curve unbuilt with its anchors untouched.
        """
        with self._lock.write():
            if len(self._anchors) < 2:
                self._drop_built()
                raise InsufficientPointsError(len(self._anchors))

            ordered = sorted(self._anchors, key=lambda a: a.date)
            for prev, curr in zip(ordered, ordered[1:]):
                if curr.date == prev.date:
                    self._drop_built()
                    raise DuplicateDateError(curr.date)

            interpolator = create_interpolator("log_linear", extrapolation=self.extrapolation)
            interpolator.fit(
                np.array([a.serial for a in ordered], dtype=np.float64),
                np.array([a.discount_factor for a in ordered], dtype=np.float64),
            )
            _warn_on_unusual_factors(ordered)

            self._anchors = list(ordered)
            self._built_anchors = tuple(ordered)
            self._interpolator = interpolator

        logger.debug(
            "Built discount curve: %d anchors %s..%s, %s",
            len(ordered), ordered[0].date, ordered[-1].date, self.day_count.value,
        )

    def clear(self) -> None:
        """Remove all anchors; the curve must be rebuilt before queries."""
        with self._lock.write():
            self._anchors = []
            self._drop_built()
        logger.debug("Cleared discount curve")

    def _drop_built(self) -> None:
        self._built_anchors = ()
        self._interpolator = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def is_built(self) -> bool:
        return self._interpolator is not None

    @property
    def reference_date(self) -> Optional[date]:
        """Explicit reference date, else the first built anchor date."""
        if self._reference_date is not None:
            return self._reference_date
        with self._lock.read():
            return self._built_anchors[0].date if self._built_anchors else None

    def get_point_count(self) -> int:
        """Number of anchors added, whether or not the curve is built."""
        with self._lock.read():
            return len(self._anchors)

    def __len__(self) -> int:
        return self.get_point_count()

    def get_anchors(self) -> List[Tuple[date, float]]:
        """
        Get all anchors.

        Returns:
            List of (date, discount_factor), date-sorted after a successful build
        """
        with self._lock.read():
            return [(a.date, a.discount_factor) for a in self._anchors]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _require_built(self) -> LogLinearInterpolator:
        if self._interpolator is None:
            raise NotBuiltError()
        return self._interpolator

    def _reference(self) -> date:
        return self._reference_date or self._built_anchors[0].date

    def _serial_in_policy(self, interpolator: LogLinearInterpolator, d: date) -> int:
        serial = serial_number(d)
        if self.extrapolation == Extrapolation.NONE and not interpolator.in_range(serial):
            raise ExtrapolationError(d, self._built_anchors[0].date, self._built_anchors[-1].date)
        return serial

    def _discount(self, interpolator: LogLinearInterpolator, d: date) -> float:
        return interpolator.discount_factor(self._serial_in_policy(interpolator, d))

    def _forward(self, interpolator, d1, d2, compounding, frequency) -> float:
        if d1 >= d2:
            raise InvalidDateOrderError(d1, d2)
        df1 = self._discount(interpolator, d1)
        df2 = self._discount(interpolator, d2)
        tau = year_fraction(d1, d2, self.day_count)
        with np.errstate(divide='ignore', invalid='ignore'):
            ratio = np.float64(df2) / df1
        return rate_from_discount(ratio, tau, compounding, frequency)

    def _resolve(self, compounding, frequency) -> Tuple[Compounding, Frequency]:
        compounding = self.compounding if compounding is None else Compounding.coerce(compounding)
        frequency = self.frequency if frequency is None else Frequency.coerce(frequency)
        return compounding, frequency

    def discount(self, d: date) -> float:
        """
        Get discount factor P(d).

        Args:
            d: Query date

        Returns:
            Discount factor, exactly the anchor value on an anchor date
        """
        with self._lock.read():
            interpolator = self._require_built()
            return self._discount(interpolator, _as_date(d))

    def zero_rate(
        self,
        d: date,
        compounding: Optional[Union[Compounding, int, str]] = None,
        frequency: Optional[Union[Frequency, int, str]] = None,
    ) -> float:
        """
        Get zero rate from the reference date to d.

        Args:
            d: Maturity date
            compounding: Compounding rule (curve default if None)
            frequency: Compounding frequency (curve default if None)

        Returns:
            Zero rate as a decimal

        Raises:
            NotBuiltError: Curve not built
            InvalidFrequencyError: Periodic compounding with NoFrequency/Once
            InvalidTimeSpanError: d not after the reference date
        """
        compounding, frequency = self._resolve(compounding, frequency)
        d = _as_date(d)
        with self._lock.read():
            interpolator = self._require_built()
            tau = year_fraction(self._reference(), d, self.day_count)
            return rate_from_discount(self._discount(interpolator, d), tau, compounding, frequency)

    def forward_rate(
        self,
        d1: date,
        d2: date,
        compounding: Optional[Union[Compounding, int, str]] = None,
        frequency: Optional[Union[Frequency, int, str]] = None,
    ) -> float:
        """
        Get forward rate between d1 and d2.

        Implied by P(d2)/P(d1) over the day-count fraction from d1 to d2.

        Raises:
            NotBuiltError: Curve not built
            InvalidDateOrderError: d1 >= d2
            InvalidFrequencyError: Periodic compounding with NoFrequency/Once
            InvalidTimeSpanError: Day count gives a non-positive fraction
        """
        compounding, frequency = self._resolve(compounding, frequency)
        d1, d2 = _as_date(d1), _as_date(d2)
        with self._lock.read():
            interpolator = self._require_built()
            return self._forward(interpolator, d1, d2, compounding, frequency)

    def overnight_forward_rate(
        self,
        d: date,
        compounding: Optional[Union[Compounding, int, str]] = None,
        frequency: Optional[Union[Frequency, int, str]] = None,
    ) -> float:
        """Forward rate from d to the next calendar day."""
        d = _as_date(d)
        return self.forward_rate(d, d + timedelta(days=1), compounding, frequency)

    def daily_forward_rates(
        self,
        start: date,
        end: date,
        compounding: Optional[Union[Compounding, int, str]] = None,
        frequency: Optional[Union[Frequency, int, str]] = None,
    ) -> pd.DataFrame:
        """
        Overnight forward rate for every calendar day from start to end.

        Args:
            start: First date (inclusive)
            end: Last date (inclusive)
            compounding: Compounding rule (curve default if None)
            frequency: Compounding frequency (curve default if None)

        Returns:
            DataFrame with columns date and forward_rate, one row per day

        Raises:
            NotBuiltError: Curve not built
            InvalidDateOrderError: start > end
        """
        compounding, frequency = self._resolve(compounding, frequency)
        start, end = _as_date(start), _as_date(end)
        if start > end:
            raise InvalidDateOrderError(start, end)

        rows = []
        with self._lock.read():
            interpolator = self._require_built()
            current = start
            while current <= end:
                following = current + timedelta(days=1)
                rows.append({
                    'date': current,
                    'forward_rate': self._forward(
                        interpolator, current, following, compounding, frequency
                    ),
                })
                current = following
        return pd.DataFrame(rows, columns=['date', 'forward_rate'])

    def instantaneous_forward(self, d: date) -> float:
        """
        Get instantaneous forward rate f(d).

        f(d) = -d/dt [log P(d)], annualised on the day count's basis. With
        log-linear interpolation this is constant between anchors; on an
        anchor date the segment ending there is used (the first segment on
        the first anchor).

        Raises:
            NotBuiltError: Curve not built
            ExtrapolationError: d outside the anchors with extrapolation NONE
        """
        d = _as_date(d)
        with self._lock.read():
            interpolator = self._require_built()
            serial = self._serial_in_policy(interpolator, d)
            return -interpolator.derivative(serial) * days_in_year(d, self.day_count)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabulate the built anchors.

        Returns:
            DataFrame with date, serial, discount_factor and the continuously
            compounded zero_rate (NaN where the year fraction is not positive)
        """
        with self._lock.read():
            self._require_built()
            reference = self._reference()
            rows = []
            for anchor in self._built_anchors:
                tau = year_fraction(reference, anchor.date, self.day_count)
                zero = np.nan
                if tau > 0:
                    zero = rate_from_discount(anchor.discount_factor, tau, Compounding.CONTINUOUS)
                rows.append({
                    'date': anchor.date,
                    'serial': anchor.serial,
                    'discount_factor': anchor.discount_factor,
                    'zero_rate': zero,
                })
        return pd.DataFrame(rows, columns=['date', 'serial', 'discount_factor', 'zero_rate'])

    def __repr__(self) -> str:
        return (f"DiscountCurve(points={len(self._anchors)}, built={self.is_built}, "
                f"day_count={self.day_count.value}, extrapolation={self.extrapolation.value})")


def _warn_on_unusual_factors(ordered: List[CurveAnchor]) -> None:
    for anchor in ordered:
        if not anchor.discount_factor > 0:
            logger.warning(
                "Non-positive discount factor %s at %s", anchor.discount_factor, anchor.date
            )
    for prev, curr in zip(ordered, ordered[1:]):
        if curr.discount_factor > prev.discount_factor:
            logger.warning(
                "Discount factors increasing at %s (%.8f -> %.8f)",
                curr.date, prev.discount_factor, curr.discount_factor,
            )


__all__ = [
    "CurveAnchor",
    "DiscountCurve",
]
