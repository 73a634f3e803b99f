"""
Test suite for CubePoint and Direction.

Tests cover:
- Construction and the zero-sum invariant
- Componentwise arithmetic and casting
- Direction table and opposites
- Neighbors, distance and lerp
"""

import pytest
from ahistorics_hex import DIRECTIONS, ORIGIN, CubePoint, Direction, cube_dir, cube_lerp


class TestConstruction:
    def test_from_q_r_derives_b(self):
        p = CubePoint.from_q_r(2, -5)
        assert (p.a, p.b, p.c) == (2, 3, -5)
        assert p.q == 2
        assert p.r == -5

    def test_invalid_integer_point_rejected(self):
        with pytest.raises(ValueError):
            CubePoint(1, 1, 1)

    def test_float_points_not_checked(self):
        p = CubePoint(0.3, 0.3, 0.3)
        assert not p.is_valid()

    @pytest.mark.parametrize("q,r", [(0, 0), (3, -7), (-12, 4), (100, 100)])
    def test_zero_sum(self, q, r):
        p = CubePoint.from_q_r(q, r)
        assert p.a + p.b + p.c == 0
        assert p.is_valid()

    def test_iter(self):
        assert tuple(CubePoint(1, -3, 2)) == (1, -3, 2)


class TestArithmetic:
    def test_add(self):
        assert CubePoint(1, -1, 0) + CubePoint(0, 2, -2) == CubePoint(1, 1, -2)

    def test_sub(self):
        assert CubePoint(1, -1, 0) - CubePoint(0, 2, -2) == CubePoint(1, -3, 2)

    def test_neg(self):
        assert -CubePoint(1, -3, 2) == CubePoint(-1, 3, -2)

    def test_scalar_mul(self):
        assert CubePoint(1, -1, 0) * 3 == CubePoint(3, -3, 0)
        assert 2 * CubePoint(1, -1, 0) == CubePoint(2, -2, 0)

    def test_cast_to_float(self):
        p = CubePoint(1, -3, 2).cast()
        assert all(isinstance(v, float) for v in p)
        assert p == CubePoint(1, -3, 2)

    def test_map(self):
        assert CubePoint(1.2, -2.2, 1.0).map(round) == CubePoint(1, -2, 1)

    def test_hashable(self):
        assert len({CubePoint(1, -1, 0), CubePoint(1.0, -1.0, 0.0)}) == 1


class TestDirection:
    def test_six_ordered(self):
        assert [d.name for d in DIRECTIONS] == [
            "UP", "UP_LEFT", "DOWN_LEFT", "DOWN", "DOWN_RIGHT", "UP_RIGHT",
        ]

    @pytest.mark.parametrize("direction", list(Direction))
    def test_offsets_are_unit_cells(self, direction):
        offset = cube_dir(direction)
        assert offset.is_valid()
        assert offset.length() == 1

    @pytest.mark.parametrize("direction", list(Direction))
    def test_opposite_is_negation(self, direction):
        opposite = DIRECTIONS[(direction + 3) % 6]
        assert cube_dir(opposite) == -cube_dir(direction)
        assert direction.opposite is opposite

    def test_offsets_distinct(self):
        assert len({d.offset for d in Direction}) == 6


class TestNeighborsAndDistance:
    def test_neighbors_of_origin(self):
        assert ORIGIN.neighbors() == [cube_dir(d) for d in Direction]

    def test_neighbor(self):
        p = CubePoint.from_q_r(2, 2)
        assert p.neighbor(Direction.DOWN) == CubePoint.from_q_r(2, 3)

    def test_distance(self):
        assert ORIGIN.distance_to(CubePoint.from_q_r(2, 1)) == 3
        assert CubePoint.from_q_r(-1, 4).distance_to(CubePoint.from_q_r(-1, 4)) == 0

    def test_neighbors_all_at_distance_one(self):
        center = CubePoint.from_q_r(5, -3)
        assert all(center.distance_to(n) == 1 for n in center.neighbors())


class TestLerp:
    def test_midpoint(self):
        mid = cube_lerp(ORIGIN.cast(), CubePoint(2, -2, 0), 0.5)
        assert mid == CubePoint(1.0, -1.0, 0.0)

    def test_endpoints(self):
        start = CubePoint(0.5, -0.25, -0.25)
        end = CubePoint(3, -1, -2)
        assert cube_lerp(start, end, 0.0) == start
        assert cube_lerp(start, end, 1.0) == end
