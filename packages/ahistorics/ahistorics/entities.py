"""Camera and Player - entities that walk and turn on the hex grid."""
from __future__ import annotations

import math

from ahistorics_hex import ORIGIN, Angle, CubePoint
from ahistorics_motion import GridMover, TransitionedGridPos

CAMERA_ANIM_TIME = 0.4
PLAYER_ANIM_TIME = 0.25


class Camera(GridMover):
    """Viewpoint that follows the player's moves on its own, slower, timing."""

    def __init__(
        self,
        anim_time: float = CAMERA_ANIM_TIME,
        start_pos: CubePoint = ORIGIN,
        start_angle: Angle | None = None,
    ) -> None:
        self.grid_pos = TransitionedGridPos(anim_time, start_pos, start_angle)

    @staticmethod
    def view_radius(width: float, height: float) -> float:
        """Half-diagonal of a ``width`` x ``height`` view."""
        return math.hypot(width / 2.0, height / 2.0)

    def __repr__(self) -> str:
        return f"Camera({self.grid_pos!r})"


class Player(GridMover):
    def __init__(
        self,
        anim_time: float = PLAYER_ANIM_TIME,
        start_pos: CubePoint = ORIGIN,
        start_angle: Angle | None = None,
    ) -> None:
        self.grid_pos = TransitionedGridPos(anim_time, start_pos, start_angle)

    def __repr__(self) -> str:
        return f"Player({self.grid_pos!r})"
