"""
Unit tests for RateCurve.
"""

import math
import pytest

from ratecurves.curves import RateCurve
from ratecurves.errors import CurveErrorKind, NegativeTimeError


@pytest.fixture
def two_point_curve():
    curve = RateCurve()
    curve.add_point(0.0, 0.02)
    curve.add_point(10.0, 0.04)
    return curve


class TestDegenerateCurves:
    """Empty and single-sample curves never fail."""

    def test_empty_curve(self):
        curve = RateCurve()
        for t in (-1.0, 0.0, 5.0, 100.0):
            assert curve.interpolate_rate(t) == 0.0
        assert curve.discount(5.0) == 1.0
        assert curve.get_point_count() == 0

    def test_single_point_is_flat(self):
        curve = RateCurve()
        curve.add_point(5.0, 0.03)

        assert curve.interpolate_rate(0.0) == 0.03
        assert curve.interpolate_rate(5.0) == 0.03
        assert curve.interpolate_rate(100.0) == 0.03

    def test_single_time_with_duplicates(self):
        curve = RateCurve()
        curve.add_point(5.0, 0.03)
        curve.add_point(5.0, 0.04)

        assert curve.get_point_count() == 2
        assert curve.interpolate_rate(1.0) == 0.04


class TestInterpolation:
    """Tests for linear interpolation."""

    def test_linear_midpoint(self, two_point_curve):
        assert abs(two_point_curve.interpolate_rate(5.0) - 0.03) < 1e-15

    def test_discount(self, two_point_curve):
        df = two_point_curve.discount(5.0)
        assert abs(df - math.exp(-0.03 * 5)) < 1e-15
        assert abs(df - 0.8607) < 1e-4

    def test_exact_at_samples(self, two_point_curve):
        assert two_point_curve.interpolate_rate(0.0) == 0.02
        assert two_point_curve.interpolate_rate(10.0) == 0.04

    def test_flat_beyond_last_sample(self, two_point_curve):
        assert two_point_curve.interpolate_rate(30.0) == 0.04

    def test_left_of_first_sample_extends_first_segment(self):
        curve = RateCurve()
        curve.add_point(2.0, 0.02)
        curve.add_point(4.0, 0.03)

        assert abs(curve.interpolate_rate(0.0) - 0.01) < 1e-15

    def test_unordered_insertion(self):
        curve = RateCurve()
        curve.add_point(10.0, 0.04)
        curve.add_point(0.0, 0.02)
        curve.add_point(5.0, 0.035)

        assert curve.get_points() == [(0.0, 0.02), (5.0, 0.035), (10.0, 0.04)]
        assert abs(curve.interpolate_rate(7.5) - 0.0375) < 1e-15

    def test_duplicate_time_last_added_wins(self):
        curve = RateCurve()
        curve.add_point(0.0, 0.02)
        curve.add_point(5.0, 0.03)
        curve.add_point(10.0, 0.04)
        curve.add_point(5.0, 0.05)

        assert curve.get_point_count() == 4
        assert curve.interpolate_rate(5.0) == 0.05
        assert abs(curve.interpolate_rate(7.5) - 0.045) < 1e-15


class TestNegativeTime:
    """Negative time handling."""

    def test_strict_rejects(self):
        curve = RateCurve()
        with pytest.raises(NegativeTimeError) as exc:
            curve.add_point(-1.0, 0.03)
        assert exc.value.kind == CurveErrorKind.NEGATIVE_TIME
        assert curve.get_point_count() == 0

    def test_lenient_clamps(self):
        curve = RateCurve(strict=False)
        curve.add_point(-1.0, 0.03)
        assert curve.get_points() == [(0.0, 0.03)]

    def test_negative_query_time_does_not_raise(self, two_point_curve):
        assert abs(two_point_curve.interpolate_rate(-5.0) - 0.01) < 1e-15


class TestLifecycle:
    """Tests for clear and export."""

    def test_clear(self, two_point_curve):
        two_point_curve.clear()

        assert two_point_curve.get_point_count() == 0
        assert len(two_point_curve) == 0
        assert two_point_curve.interpolate_rate(5.0) == 0.0

    def test_to_dataframe(self, two_point_curve):
        frame = two_point_curve.to_dataframe()

        assert list(frame.columns) == ['time', 'rate', 'discount_factor']
        assert len(frame) == 2
        assert abs(frame['discount_factor'].iloc[1] - math.exp(-0.4)) < 1e-15

    def test_rejected_rate_leaves_curve_unchanged(self, two_point_curve):
        with pytest.raises(TypeError):
            two_point_curve.add_point(5.0, None)
        with pytest.raises(ValueError):
            two_point_curve.add_point(5.0, "n/a")

        assert two_point_curve.get_point_count() == 2
        assert two_point_curve.get_points() == [(0.0, 0.02), (10.0, 0.04)]

        two_point_curve.add_point(20.0, 0.06)
        assert two_point_curve.get_points() == [(0.0, 0.02), (10.0, 0.04), (20.0, 0.06)]
        assert abs(two_point_curve.interpolate_rate(15.0) - 0.05) < 1e-15


class TestInstantaneousForward:
    """f(t) = r(t) + t * dr/dt."""

    def test_inside_samples(self, two_point_curve):
        # r(t) = 0.02 + 0.002 t, so r(t) * t has slope 0.02 + 0.004 t
        assert abs(two_point_curve.instantaneous_forward(5.0) - 0.04) < 1e-14

    def test_flat_beyond_last_sample(self, two_point_curve):
        assert abs(two_point_curve.instantaneous_forward(30.0) - 0.04) < 1e-15

    def test_degenerate_curves(self):
        curve = RateCurve()
        assert curve.instantaneous_forward(3.0) == 0.0

        curve.add_point(5.0, 0.03)
        assert curve.instantaneous_forward(3.0) == 0.03
