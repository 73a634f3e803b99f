"""Tests for sector lookup and the GridMover mixin."""
from __future__ import annotations

import math

import pytest

from ahistorics_hex import ORIGIN, Angle, CubePoint, Direction, cube_dir
from ahistorics_motion import (
    SECTOR_DIRECTIONS,
    SECTOR_WIDTH,
    GridMover,
    TransitionedGridPos,
    direction_of,
    sector_of,
)


class Walker(GridMover):
    def __init__(self, anim_time: float = 0.4, start: CubePoint = ORIGIN) -> None:
        self.grid_pos = TransitionedGridPos(anim_time, start)


class TestSectors:
    def test_table_covers_all_directions(self) -> None:
        assert sorted(SECTOR_DIRECTIONS) == list(Direction)

    @pytest.mark.parametrize("i", range(6))
    def test_sector_centres(self, i: int) -> None:
        angle = Angle(i * math.pi / 3)
        assert sector_of(angle) == i
        assert direction_of(angle) is SECTOR_DIRECTIONS[i]

    def test_rounds_to_nearest(self) -> None:
        assert sector_of(Angle.from_degrees(25)) == 0
        assert sector_of(Angle.from_degrees(35)) == 1
        assert sector_of(Angle.from_degrees(335)) == 0

    def test_boundary_tie_goes_anticlockwise(self) -> None:
        # pi/6 is exactly half of pi/3 in floating point.
        assert sector_of(Angle(SECTOR_WIDTH / 2)) == 1
        assert direction_of(Angle(SECTOR_WIDTH / 2)) is Direction.UP_LEFT
        assert sector_of(Angle(SECTOR_WIDTH / 2 * 0.999)) == 0

    def test_just_below_full_turn_is_up(self) -> None:
        assert direction_of(Angle(2 * math.pi - 1e-9)) is Direction.UP


class TestUnitMove:
    def test_forward_facing_up(self) -> None:
        w = Walker()
        w.unit_move(True)
        assert w.target_pos == cube_dir(Direction.UP)

    def test_backward_facing_up(self) -> None:
        w = Walker()
        w.unit_move(False)
        assert w.target_pos == cube_dir(Direction.DOWN)

    def test_moves_accumulate_on_target(self) -> None:
        w = Walker()
        w.unit_move(True)
        w.unit_move(True)
        assert w.target_pos == cube_dir(Direction.UP) * 2
        assert w.pos == ORIGIN

    def test_uses_target_angle_mid_turn(self) -> None:
        w = Walker()
        w.turn(True)
        w.step(0.1)
        assert direction_of(w.angle) is Direction.UP
        w.unit_move(True)
        assert w.target_pos == cube_dir(Direction.UP_LEFT)

    def test_example_scenario(self) -> None:
        w = Walker(anim_time=0.4)
        w.unit_move(True)
        assert w.target_pos == cube_dir(Direction.UP)
        w.step(0.4)
        assert w.pos == cube_dir(Direction.UP).cast()
        assert w.grid_pos.pos_progress >= 1.0


class TestTurn:
    def test_anticlockwise_increments(self) -> None:
        w = Walker()
        w.turn(True)
        assert w.target_angle.radians == pytest.approx(math.pi / 3)

    def test_clockwise_decrements(self) -> None:
        w = Walker()
        w.turn(False)
        assert w.target_angle.radians == pytest.approx(5 * math.pi / 3)
        w.unit_move(True)
        assert w.target_pos == cube_dir(Direction.UP_RIGHT)

    @pytest.mark.parametrize("anticlockwise", [True, False])
    def test_six_turns_face_up_again(self, anticlockwise: bool) -> None:
        w = Walker()
        for _ in range(6):
            w.turn(anticlockwise)
        assert direction_of(w.target_angle) is Direction.UP

    def test_walk_a_hexagon_returns_home(self) -> None:
        w = Walker()
        for _ in range(6):
            w.unit_move(True)
            w.turn(True)
        assert w.target_pos == ORIGIN
        for _ in range(20):
            w.step(0.1)
        assert w.pos == ORIGIN
