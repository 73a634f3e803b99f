"""Conversions between hex coordinates and Cartesian display space.

Hexes are flat-top. With ``scale`` the outer radius of one hex:

    x = scale * 1.5 * a
    y = scale * sqrt(3) * (c + a / 2)

so the display ``y`` axis grows towards ``Direction.DOWN``. Axial
coordinates ``(q, r)`` are the cube axes ``(a, c)``.
"""
from __future__ import annotations

import math

from ahistorics_hex.cube import CubePoint, Scalar

SQRT_3 = math.sqrt(3.0)
SQRT_3_ON_2 = SQRT_3 / 2.0

Vec2 = tuple[float, float]

# Unit flat-top hexagon, corner 0 on the +x axis.
HEXAGON_POLY: tuple[Vec2, ...] = (
    (1.0, 0.0),
    (0.5, SQRT_3_ON_2),
    (-0.5, SQRT_3_ON_2),
    (-1.0, 0.0),
    (-0.5, -SQRT_3_ON_2),
    (0.5, -SQRT_3_ON_2),
)


def _check_scale(scale: float) -> None:
    if scale <= 0:
        raise ValueError(f"scale must be positive, got {scale}")


def axial_to_real(coord: tuple[Scalar, Scalar], scale: float = 1.0) -> Vec2:
    _check_scale(scale)
    q, r = coord
    return (scale * 1.5 * q, scale * SQRT_3 * (r + q / 2.0))


def cube_to_real(point: CubePoint, scale: float = 1.0) -> Vec2:
    return axial_to_real((point.a, point.c), scale)


def real_to_cube(point: Vec2, scale: float = 1.0) -> CubePoint:
    """Inverse of :func:`cube_to_real`; the result is fractional."""
    _check_scale(scale)
    x, y = point
    a = x / (1.5 * scale)
    c = y / (SQRT_3 * scale) - a / 2.0
    return CubePoint(a, -a - c, c)


def _round_half_away(x: float) -> int:
    n = math.floor(abs(x) + 0.5)
    return n if x >= 0 else -n


def cube_round(point: CubePoint) -> CubePoint:
    """Snap a fractional cube point to the nearest cell.

    Each axis is rounded on its own, halves away from zero, then the axis
    that moved furthest is recomputed from the other two so the result
    stays on the plane.
    """
    a = _round_half_away(point.a)
    b = _round_half_away(point.b)
    c = _round_half_away(point.c)

    da = abs(a - point.a)
    db = abs(b - point.b)
    dc = abs(c - point.c)

    if da > db and da > dc:
        a = -b - c
    elif db > dc:
        b = -a - c
    else:
        c = -a - b

    return CubePoint(a, b, c)


def pixel_to_cell(point: Vec2, scale: float = 1.0) -> CubePoint:
    return cube_round(real_to_cube(point, scale))


def hex_corners(center: Vec2, size: float) -> list[Vec2]:
    cx, cy = center
    return [(cx + size * px, cy + size * py) for px, py in HEXAGON_POLY]
