"""Tests for the fixed-timestep Clock."""

import pytest
from ahistorics import Clock, TickContext


class TestClock:
    def test_dt_from_ups(self):
        assert Clock(60).dt == pytest.approx(1 / 60)
        assert Clock(4).dt == 0.25

    @pytest.mark.parametrize("ups", [0, -10])
    def test_non_positive_ups_rejected(self, ups):
        with pytest.raises(ValueError):
            Clock(ups)

    def test_advance_counts(self):
        clock = Clock(4)
        assert clock.advance() == 1
        assert clock.advance() == 2
        assert clock.tick_number == 2

    def test_context(self):
        clock = Clock(4)
        clock.advance()
        clock.advance()
        ctx = clock.context()
        assert ctx == TickContext(tick_number=2, dt=0.25, elapsed=0.5)

    def test_context_is_frozen(self):
        ctx = Clock(4).context()
        with pytest.raises(AttributeError):
            ctx.dt = 1.0

    def test_reset(self):
        clock = Clock(4)
        clock.advance()
        clock.accumulate(0.1)
        clock.reset(10)
        assert clock.tick_number == 10
        assert clock.banked == 0.0


class TestAccumulate:
    def test_whole_ticks_due(self):
        clock = Clock(4)
        assert clock.accumulate(0.5) == 2
        assert clock.banked == 0.0

    def test_remainder_carries_over(self):
        clock = Clock(4)
        assert clock.accumulate(0.125) == 0
        assert clock.banked == 0.125
        assert clock.accumulate(0.125) == 1
        assert clock.banked == 0.0

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            Clock(4).accumulate(-0.01)

    def test_drop_banked(self):
        clock = Clock(4)
        clock.accumulate(0.2)
        clock.drop_banked()
        assert clock.banked == 0.0
