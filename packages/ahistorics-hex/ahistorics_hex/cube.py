"""CubePoint and Direction - cube coordinates for flat-top hex cells."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Iterator

Scalar = int | float


@dataclass(frozen=True, slots=True)
class CubePoint:
    """A hex position ``(a, b, c)``.

    Integer points name cells and must lie on the ``a + b + c == 0`` plane.
    Float points are interpolated positions and are only expected to be
    close to it.
    """

    a: Scalar
    b: Scalar
    c: Scalar

    def __post_init__(self) -> None:
        if self.is_integral() and self.a + self.b + self.c != 0:
            raise ValueError(
                f"Integer cube point ({self.a}, {self.b}, {self.c}) "
                "does not satisfy a + b + c == 0"
            )

    @classmethod
    def from_q_r(cls, q: Scalar, r: Scalar) -> CubePoint:
        """Build from the two free axes; ``b`` is derived as ``-(q + r)``."""
        return cls(q, -(q + r), r)

    @property
    def q(self) -> Scalar:
        return self.a

    @property
    def r(self) -> Scalar:
        return self.c

    def is_integral(self) -> bool:
        return all(isinstance(v, int) for v in (self.a, self.b, self.c))

    def is_valid(self) -> bool:
        return self.is_integral() and self.a + self.b + self.c == 0

    def map(self, fn: Callable[[Scalar], Scalar]) -> CubePoint:
        return CubePoint(fn(self.a), fn(self.b), fn(self.c))

    def cast(self) -> CubePoint:
        return self.map(float)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.a
        yield self.b
        yield self.c

    def __add__(self, other: CubePoint) -> CubePoint:
        return CubePoint(self.a + other.a, self.b + other.b, self.c + other.c)

    def __sub__(self, other: CubePoint) -> CubePoint:
        return CubePoint(self.a - other.a, self.b - other.b, self.c - other.c)

    def __neg__(self) -> CubePoint:
        return CubePoint(-self.a, -self.b, -self.c)

    def __mul__(self, k: Scalar) -> CubePoint:
        return CubePoint(self.a * k, self.b * k, self.c * k)

    __rmul__ = __mul__

    def neighbor(self, direction: Direction) -> CubePoint:
        return self + cube_dir(direction)

    def neighbors(self) -> list[CubePoint]:
        return [self + offset for offset in _DIRECTION_OFFSETS]

    def length(self) -> Scalar:
        total = abs(self.a) + abs(self.b) + abs(self.c)
        if self.is_integral():
            return total // 2
        return total / 2

    def distance_to(self, other: CubePoint) -> Scalar:
        return (self - other).length()


ORIGIN = CubePoint(0, 0, 0)


class Direction(IntEnum):
    """The six neighbor directions, anticlockwise from ``UP``."""

    UP = 0
    UP_LEFT = 1
    DOWN_LEFT = 2
    DOWN = 3
    DOWN_RIGHT = 4
    UP_RIGHT = 5

    @property
    def offset(self) -> CubePoint:
        return _DIRECTION_OFFSETS[self]

    @property
    def opposite(self) -> Direction:
        return DIRECTIONS[(self + 3) % 6]


DIRECTIONS: tuple[Direction, ...] = tuple(Direction)

# Indexed by Direction; i and i + 3 are negations of each other.
_DIRECTION_OFFSETS: tuple[CubePoint, ...] = (
    CubePoint(0, 1, -1),
    CubePoint(-1, 1, 0),
    CubePoint(-1, 0, 1),
    CubePoint(0, -1, 1),
    CubePoint(1, -1, 0),
    CubePoint(1, 0, -1),
)


def cube_dir(direction: Direction) -> CubePoint:
    return _DIRECTION_OFFSETS[direction]


def cube_lerp(start: CubePoint, end: CubePoint, t: float) -> CubePoint:
    """Componentwise linear blend between two points."""
    return CubePoint(
        start.a + (end.a - start.a) * t,
        start.b + (end.b - start.b) * t,
        start.c + (end.c - start.c) * t,
    )
