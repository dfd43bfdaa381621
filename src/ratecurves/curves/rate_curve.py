"""
Time-indexed zero rate curve.

A lightweight alternative to DiscountCurve: samples are (time, rate) with
time as a year fraction from an implicit reference point. Rates are linearly
interpolated and discount factors are continuously compounded,
P(t) = exp(-r(t) * t). There is no build step, and queries never raise:

- no samples: rate 0.0
- one distinct time: that rate everywhere
- beyond the last sample: last rate (flat)
- before the first sample: first segment extended linearly
"""

from bisect import bisect_right
from typing import List, Optional, Tuple
import logging

import numpy as np
import pandas as pd

from ..errors import NegativeTimeError
from .interpolation import LinearInterpolator, create_interpolator
from .locking import ReadWriteLock

logger = logging.getLogger(__name__)


class RateCurve:
    """
    Zero rate curve with linear interpolation.

    Args:
        strict: Reject negative times with NegativeTimeError (default);
            when False they are clamped to 0.0

    Samples are kept sorted by time as they are added. When several samples
    share a time, the last one added is the one used for interpolation; all
    of them still count in get_point_count().
    """

    def __init__(self, strict: bool = True):
        self.strict = strict
        self._times: List[float] = []
        self._rates: List[float] = []
        self._interpolator: Optional[LinearInterpolator] = None
        self._flat_rate: Optional[float] = None
        self._lock = ReadWriteLock()

    def add_point(self, time: float, rate: float) -> None:
        """
        Add a zero rate sample.

        Args:
            time: Year fraction, must be >= 0 in strict mode
            rate: Continuously compounded zero rate
        """
        time = float(time)
        rate = float(rate)
        if time < 0:
            if self.strict:
                raise NegativeTimeError(time)
            logger.debug("Clamping negative time %s to 0.0", time)
            time = 0.0

        with self._lock.write():
            idx = bisect_right(self._times, time)
            self._times.insert(idx, time)
            self._rates.insert(idx, rate)
            self._refit()

    def _refit(self) -> None:
        # last-added wins: bisect_right placed it at the end of its run
        times: List[float] = []
        rates: List[float] = []
        for t, r in zip(self._times, self._rates):
            if times and times[-1] == t:
                rates[-1] = r
            else:
                times.append(t)
                rates.append(r)

        if len(times) >= 2:
            interpolator = create_interpolator("linear")
            interpolator.fit(np.array(times), np.array(rates))
            self._interpolator = interpolator
            self._flat_rate = None
        else:
            self._interpolator = None
            self._flat_rate = rates[0] if rates else None

    def clear(self) -> None:
        """Remove all samples."""
        with self._lock.write():
            self._times = []
            self._rates = []
            self._interpolator = None
            self._flat_rate = None

    def interpolate_rate(self, time: float) -> float:
        """
        Get zero rate at time.

        Args:
            time: Year fraction

        Returns:
            Linearly interpolated rate (see module docstring for edges)
        """
        with self._lock.read():
            if self._interpolator is not None:
                return self._interpolator.interpolate(time)
            if self._flat_rate is not None:
                return self._flat_rate
            return 0.0

    def discount(self, time: float) -> float:
        """Discount factor exp(-r(t) * t)."""
        return float(np.exp(-self.interpolate_rate(time) * time))

    def instantaneous_forward(self, time: float) -> float:
        """
        Get instantaneous forward rate f(t).

        f(t) = -d/dt [log P(t)]
             = r(t) + t * dr/dt

        dr/dt is zero beyond the last sample and on degenerate curves.
        """
        with self._lock.read():
            if self._interpolator is not None:
                rate = self._interpolator.interpolate(time)
                return float(rate + time * self._interpolator.derivative(time))
            if self._flat_rate is not None:
                return self._flat_rate
            return 0.0

    def get_point_count(self) -> int:
        with self._lock.read():
            return len(self._times)

    def __len__(self) -> int:
        return self.get_point_count()

    def get_points(self) -> List[Tuple[float, float]]:
        """
        Get all samples.

        Returns:
            List of (time, rate) sorted by time, duplicates in insertion order
        """
        with self._lock.read():
            return list(zip(self._times, self._rates))

    def to_dataframe(self) -> pd.DataFrame:
        """Tabulate samples with their discount factors."""
        points = self.get_points()
        frame = pd.DataFrame(points, columns=['time', 'rate'])
        frame['discount_factor'] = np.exp(-frame['rate'] * frame['time'])
        return frame

    def __repr__(self) -> str:
        return f"RateCurve(points={len(self._times)}, strict={self.strict})"


__all__ = ["RateCurve"]
