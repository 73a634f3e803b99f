"""Viewport - projects hex positions to screen space around the camera."""
from __future__ import annotations

from ahistorics.settings import ViewSettings
from ahistorics_hex import HEXAGON_POLY, CubePoint, cube_to_real, matrix
from ahistorics_hex.convert import Vec2
from ahistorics_motion import Positioned

MAX_TILE_FILL = 0.975


class Viewport:
    """A ``width`` x ``height`` screen showing ``hex_scaled_height`` hexes.

    Points are drawn relative to the camera's interpolated position and
    rotated by its interpolated angle, so the camera's facing is always
    screen-up.
    """

    def __init__(
        self,
        width: float,
        height: float,
        hex_scaled_height: float = 12.0,
        spacing: float = 0.875,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Viewport dimensions must be positive")
        if hex_scaled_height <= 0:
            raise ValueError("hex_scaled_height must be positive")
        self.width = width
        self.height = height
        self.spacing = spacing
        self.scale_factor = height / hex_scaled_height

    @classmethod
    def from_settings(cls, width: float, height: float, view: ViewSettings) -> Viewport:
        return cls(width, height, view.hex_scaled_height, view.spacing)

    @property
    def center(self) -> Vec2:
        return (self.width / 2.0, self.height / 2.0)

    def camera_transform(self, camera: Positioned) -> matrix.Matrix:
        return matrix.chain(matrix.rot(camera.angle.radians), matrix.trans(self.center))

    def project(self, point: CubePoint, camera: Positioned) -> Vec2:
        rel = point.cast() - camera.pos
        return matrix.transform_pos(
            self.camera_transform(camera), cube_to_real(rel, self.scale_factor)
        )

    def is_visible(self, screen_pos: Vec2) -> bool:
        x, y = screen_pos
        margin = self.scale_factor
        return -margin < x < self.width + margin and -margin < y < self.height + margin

    def tile_size(self, depth: int = 0) -> float:
        fill = min(self.spacing * (1.0 + depth / 16.0), MAX_TILE_FILL)
        return self.scale_factor * fill

    def hex_polygon(
        self, point: CubePoint, camera: Positioned, depth: int = 0
    ) -> list[Vec2]:
        """Screen-space corners of the tile at ``point``."""
        to_screen = matrix.chain(
            matrix.scale_uni(self.tile_size(depth)),
            matrix.rot(camera.angle.radians),
            matrix.trans(self.project(point, camera)),
        )
        return [matrix.transform_pos(to_screen, corner) for corner in HEXAGON_POLY]
