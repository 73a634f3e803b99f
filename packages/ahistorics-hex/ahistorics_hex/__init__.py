"""ahistorics-hex - Hex coordinates, angles and display transforms."""
from __future__ import annotations

from ahistorics_hex.angle import TAU, Angle
from ahistorics_hex.cube import (
    DIRECTIONS,
    ORIGIN,
    CubePoint,
    Direction,
    cube_dir,
    cube_lerp,
)
from ahistorics_hex.convert import (
    HEXAGON_POLY,
    SQRT_3,
    SQRT_3_ON_2,
    axial_to_real,
    cube_round,
    cube_to_real,
    hex_corners,
    pixel_to_cell,
    real_to_cube,
)

__all__ = [
    "TAU",
    "Angle",
    "DIRECTIONS",
    "ORIGIN",
    "CubePoint",
    "Direction",
    "cube_dir",
    "cube_lerp",
    "HEXAGON_POLY",
    "SQRT_3",
    "SQRT_3_ON_2",
    "axial_to_real",
    "cube_round",
    "cube_to_real",
    "hex_corners",
    "pixel_to_cell",
    "real_to_cube",
]
