"""Scene - the camera and player stepped together each tick."""
from __future__ import annotations

from typing import Iterator

from ahistorics.entities import Camera, Player
from ahistorics.settings import Timing
from ahistorics_hex import ORIGIN, CubePoint
from ahistorics_motion import Positioned


class Scene:
    def __init__(self, camera: Camera, player: Player) -> None:
        self.camera = camera
        self.player = player

    @classmethod
    def from_timing(cls, timing: Timing, start_pos: CubePoint = ORIGIN) -> Scene:
        return cls(
            Camera(timing.camera_anim_time, start_pos),
            Player(timing.player_anim_time, start_pos),
        )

    def movers(self) -> Iterator[Positioned]:
        yield self.camera
        yield self.player

    def step(self, dt: float) -> None:
        for mover in self.movers():
            mover.step(dt)
