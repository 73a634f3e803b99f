"""Tests for the quadratic Bezier easing curve."""

import pytest
from ahistorics_motion import bezier2, linear, transition_ease


class TestBezier2:
    """Test the one-dimensional quadratic Bezier."""

    def test_endpoints(self):
        """t=0 gives p0 and t=1 gives p2."""
        assert bezier2(2.0, 7.0, -3.0, 0.0) == 2.0
        assert bezier2(2.0, 7.0, -3.0, 1.0) == -3.0

    def test_midpoint(self):
        """At t=0.5 the curve is (p0 + 2*p1 + p2) / 4."""
        assert bezier2(0.0, 1.0, 0.0, 0.5) == 0.5
        assert bezier2(1.0, 2.0, 5.0, 0.5) == pytest.approx(2.5)

    def test_straight_control_is_linear(self):
        """A control point halfway between the ends gives a straight line."""
        for t in [0.0, 0.2, 0.5, 0.8, 1.0]:
            assert bezier2(0.0, 0.5, 1.0, t) == pytest.approx(t)


class TestTransitionEase:
    """Test the movement ease with control points 0, 0.75, 1."""

    def test_maps_zero_to_zero(self):
        assert transition_ease(0.0) == 0.0

    def test_maps_one_to_one_exactly(self):
        assert transition_ease(1.0) == 1.0

    def test_front_loaded(self):
        """Halfway through time, more than halfway through distance."""
        assert transition_ease(0.5) == pytest.approx(0.625)
        assert transition_ease(0.5) > linear(0.5)

    def test_monotonic_in_unit_range(self):
        values = [transition_ease(i / 20) for i in range(21)]
        assert values == sorted(values)
        assert all(0.0 <= v <= 1.0 for v in values)
