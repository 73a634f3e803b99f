"""2D affine transform helpers operating on 2x3 row-major tuples."""
from __future__ import annotations

import math

Row = tuple[float, float, float]
Matrix = tuple[Row, Row]
Vec2 = tuple[float, float]


def identity() -> Matrix:
    return ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))


def rot(theta: float) -> Matrix:
    """Anticlockwise rotation by ``theta`` radians in a y-up frame."""
    cos = math.cos(theta)
    sin = math.sin(theta)
    return ((cos, -sin, 0.0), (sin, cos, 0.0))


def scale(x: float, y: float) -> Matrix:
    return ((x, 0.0, 0.0), (0.0, y, 0.0))


def scale_uni(k: float) -> Matrix:
    return scale(k, k)


def trans(v: Vec2) -> Matrix:
    return ((1.0, 0.0, v[0]), (0.0, 1.0, v[1]))


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """Compose so that ``b`` is applied first, then ``a``."""
    (a00, a01, a02), (a10, a11, a12) = a
    (b00, b01, b02), (b10, b11, b12) = b
    return (
        (a00 * b00 + a01 * b10, a00 * b01 + a01 * b11, a00 * b02 + a01 * b12 + a02),
        (a10 * b00 + a11 * b10, a10 * b01 + a11 * b11, a10 * b02 + a11 * b12 + a12),
    )


def chain(*matrices: Matrix) -> Matrix:
    """Compose left to right: the first matrix is applied first."""
    result = identity()
    for m in matrices:
        result = multiply(m, result)
    return result


def scalar_mul(m: Matrix, k: float) -> Matrix:
    return (
        (m[0][0] * k, m[0][1] * k, m[0][2] * k),
        (m[1][0] * k, m[1][1] * k, m[1][2] * k),
    )


def transform_vec(m: Matrix, v: Vec2) -> Vec2:
    x, y = v
    return (m[0][0] * x + m[0][1] * y, m[1][0] * x + m[1][1] * y)


def transform_pos(m: Matrix, p: Vec2) -> Vec2:
    x, y = p
    return (
        m[0][0] * x + m[0][1] * y + m[0][2],
        m[1][0] * x + m[1][1] * y + m[1][2],
    )


def det(m: Matrix) -> float:
    return m[0][0] * m[1][1] - m[0][1] * m[1][0]


def inv(m: Matrix) -> Matrix:
    d = det(m)
    if d == 0.0:
        raise ValueError("Matrix is singular and has no inverse")
    (m00, m01, m02), (m10, m11, m12) = m
    i00, i01 = m11 / d, -m01 / d
    i10, i11 = -m10 / d, m00 / d
    return (
        (i00, i01, -(i00 * m02 + i01 * m12)),
        (i10, i11, -(i10 * m02 + i11 * m12)),
    )


def get_scale(m: Matrix) -> Vec2:
    return (math.hypot(m[0][0], m[1][0]), math.hypot(m[0][1], m[1][1]))
