"""Random hex field generation."""
from __future__ import annotations

import random

from ahistorics_hex import CubePoint

HexField = dict[CubePoint, int]


def generate_field(radius: int, seed: int = 42) -> HexField:
    """Scatter tiles over a hexagon of ``radius`` cells.

    Roughly half the cells are left blank. Each tile gets a depth in
    ``[-6, 2]`` which the renderer uses to vary its size.
    """
    rng = random.Random(seed)
    field: HexField = {}
    for q in range(-radius, radius + 1):
        for r in range(max(-radius, -q - radius), min(radius, -q + radius) + 1):
            if rng.random() < 0.5:
                continue
            field[CubePoint.from_q_r(q, r)] = rng.randint(-6, 2)
    # Keep the start cell walkable-looking.
    field.setdefault(CubePoint(0, 0, 0), 0)
    return field
