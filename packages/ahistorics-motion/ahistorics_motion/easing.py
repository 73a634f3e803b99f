"""Easing curves for grid transitions."""
from __future__ import annotations

from typing import Callable

Easing = Callable[[float], float]


def bezier2(p0: float, p1: float, p2: float, t: float) -> float:
    """One point on a one-dimensional quadratic Bezier curve.

    ``p0`` and ``p2`` are the end points, ``p1`` sets the curvature and
    ``t`` is expected in ``[0, 1]``.
    """
    u = 1.0 - t
    return u * (u * p0 + t * p1) + t * (u * p1 + t * p2)


def transition_ease(t: float) -> float:
    # Control point at 0.75 front-loads the motion.
    return bezier2(0.0, 0.75, 1.0, t)


def linear(t: float) -> float:
    return t
