"""
Interpolation methods shared by the curve engines.

Provides:
- LinearInterpolator: Linear in the sampled value (RateCurve zero rates)
- LogLinearInterpolator: Linear in log discount factor (DiscountCurve)

Both work on an ordered set of (x, y) samples. The x-coordinate is whatever
the owning curve uses: year fractions for RateCurve, date serial numbers for
DiscountCurve. Bracketing follows a single rule: for a query x the right node
is the first sample i >= 1 with x <= x[i].
"""

from abc import ABC, abstractmethod
from typing import Optional
import numpy as np

from ..conventions import Extrapolation


class Interpolator(ABC):
    """Abstract base class for curve interpolation."""

    def __init__(self):
        self.times: Optional[np.ndarray] = None
        self.values: Optional[np.ndarray] = None
        self.samples: Optional[np.ndarray] = None

    def fit(self, times: np.ndarray, values: np.ndarray) -> None:
        """
        Fit the interpolator to data points.

        Args:
            times: Array of x-coordinates (sorted here, must be distinct)
            values: Array of sampled values
        """
        times = np.asarray(times, dtype=np.float64)
        values = np.asarray(values, dtype=np.float64)
        if len(times) != len(values):
            raise ValueError("Times and values must have same length")
        if len(times) < 2:
            raise ValueError("Need at least 2 points for interpolation")

        idx = np.argsort(times, kind="stable")
        times = times[idx]
        if np.any(np.diff(times) <= 0):
            raise ValueError("Interpolation times must be distinct")

        self.times = times
        self.samples = values[idx]
        self.values = self._transform(self.samples)

    def _transform(self, values: np.ndarray) -> np.ndarray:
        """Map sampled values into interpolation space."""
        return values

    def _check_fitted(self) -> None:
        if self.times is None:
            raise RuntimeError("Interpolator not fitted")

    def _bracket(self, t: float) -> int:
        """Index of the right node of the segment used for t."""
        i = int(np.searchsorted(self.times, t, side='left'))
        return min(max(i, 1), len(self.times) - 1)

    def _segment(self, t: float) -> float:
        """Linear value on the bracketing segment, extending past the edges."""
        i = self._bracket(t)
        t0, t1 = self.times[i - 1], self.times[i]
        v0, v1 = self.values[i - 1], self.values[i]
        alpha = (t - t0) / (t1 - t0)
        return float((1.0 - alpha) * v0 + alpha * v1)

    def _slope(self, t: float) -> float:
        i = self._bracket(t)
        return float((self.values[i] - self.values[i - 1]) / (self.times[i] - self.times[i - 1]))

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """
        Interpolate at a single point.

        Args:
            t: x-coordinate

        Returns:
            Interpolated value (in interpolation space)
        """
        pass

    def __call__(self, t: float) -> float:
        """Convenience method to call interpolate."""
        return self.interpolate(t)

    @abstractmethod
    def derivative(self, t: float) -> float:
        """Return the first derivative at point t."""
        pass


class LinearInterpolator(Interpolator):
    """
    Linear interpolation.

    Left of the first sample the first segment is extended linearly;
    right of the last sample the last value is held flat.
    """

    def interpolate(self, t: float) -> float:
        self._check_fitted()
        if t > self.times[-1]:
            return float(self.values[-1])
        return self._segment(t)

    def derivative(self, t: float) -> float:
        """Derivative of linear interpolation (piecewise constant)."""
        self._check_fitted()
        if t > self.times[-1]:
            return 0.0
        return self._slope(t)


class LogLinearInterpolator(Interpolator):
    """
    Log-linear interpolation on discount factors.

    Interpolates linearly in log(discount factor) space, which corresponds to
    piecewise constant forward rates. interpolate() returns the log of the
    discount factor; discount_factor() returns the factor itself.

    Non-positive factors are accepted and map to -inf/nan in log space.
    """

    def __init__(self, extrapolation: Extrapolation = Extrapolation.FLAT_FORWARD):
        super().__init__()
        self.extrapolation = extrapolation

    def _transform(self, values: np.ndarray) -> np.ndarray:
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.log(values)

    def in_range(self, t: float) -> bool:
        self._check_fitted()
        return self.times[0] <= t <= self.times[-1]

    def interpolate(self, t: float) -> float:
        """Interpolate log discount factor."""
        self._check_fitted()
        if not self.in_range(t):
            if self.extrapolation == Extrapolation.NONE:
                raise ValueError(
                    f"{t} outside interpolation range [{self.times[0]}, {self.times[-1]}]"
                )
            if self.extrapolation == Extrapolation.FLAT_FACTOR:
                return float(self.values[0] if t < self.times[0] else self.values[-1])
        return self._segment(t)

    def discount_factor(self, t: float) -> float:
        """Get discount factor at t; exact at the nodes."""
        self._check_fitted()
        i = int(np.searchsorted(self.times, t, side='left'))
        if i < len(self.times) and self.times[i] == t:
            return float(self.samples[i])
        with np.errstate(invalid='ignore'):
            return float(np.exp(self.interpolate(t)))

    def derivative(self, t: float) -> float:
        """Derivative of log discount factor (negative of instantaneous forward rate)."""
        self._check_fitted()
        if not self.in_range(t) and self.extrapolation == Extrapolation.FLAT_FACTOR:
            return 0.0
        return self._slope(t)


def create_interpolator(method: str, **kwargs) -> Interpolator:
    """
    Factory function to create an interpolator by name.

    Args:
        method: One of "linear", "log_linear"
        **kwargs: Passed to the interpolator constructor

    Returns:
        Interpolator instance
    """
    method = method.lower().replace("-", "_").replace(" ", "_")

    if method in ("linear", "lin"):
        return LinearInterpolator(**kwargs)
    elif method in ("log_linear", "loglinear"):
        return LogLinearInterpolator(**kwargs)
    else:
        raise ValueError(f"Unknown interpolation method: {method}")


__all__ = [
    "Interpolator",
    "LinearInterpolator",
    "LogLinearInterpolator",
    "create_interpolator",
]
