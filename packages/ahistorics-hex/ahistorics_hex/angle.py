"""Angle - radians modulo a full turn."""
from __future__ import annotations

import math

TAU = 2.0 * math.pi


def _normalize(radians: float) -> float:
    wrapped = radians % TAU
    # -1e-20 % TAU rounds up to TAU itself.
    if wrapped >= TAU:
        return 0.0
    return wrapped


class Angle:
    """An orientation stored as radians in ``[0, 2π)``.

    Every constructor and arithmetic result is re-normalized with floor
    modulo, so negative inputs wrap to the matching positive angle.
    Equality is exact on the normalized value.
    """

    __slots__ = ("_radians",)

    def __init__(self, radians: float = 0.0) -> None:
        self._radians = _normalize(float(radians))

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(math.radians(degrees))

    @property
    def radians(self) -> float:
        return self._radians

    @property
    def degrees(self) -> float:
        return math.degrees(self._radians)

    def __add__(self, other: Angle | float) -> Angle:
        return Angle(self._radians + _as_radians(other))

    def __radd__(self, other: float) -> Angle:
        return Angle(other + self._radians)

    def __sub__(self, other: Angle | float) -> Angle:
        return Angle(self._radians - _as_radians(other))

    def __neg__(self) -> Angle:
        return Angle(-self._radians)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians == other._radians

    def __hash__(self) -> int:
        return hash(self._radians)

    def __repr__(self) -> str:
        return f"Angle({self._radians!r})"

    def lerp(self, end: Angle, t: float) -> Angle:
        """Interpolate toward ``end`` along the shorter arc."""
        start = self._radians
        stop = end._radians
        diff = stop - start
        if diff > math.pi:
            start += TAU
        elif diff < -math.pi:
            stop += TAU
        return Angle(start + (stop - start) * t)


def _as_radians(value: Angle | float) -> float:
    if isinstance(value, Angle):
        return value.radians
    return float(value)
