"""Directional movement on top of a TransitionedGridPos."""
from __future__ import annotations

import math
from typing import Protocol

from ahistorics_hex import Angle, CubePoint, Direction, cube_dir

from ahistorics_motion.transition import TransitionedGridPos

SECTOR_WIDTH = math.pi / 3

# Sector index -> direction; sector 0 is centred on angle 0.
SECTOR_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.UP_LEFT,
    Direction.DOWN_LEFT,
    Direction.DOWN,
    Direction.DOWN_RIGHT,
    Direction.UP_RIGHT,
)


def sector_of(angle: Angle) -> int:
    """Index of the 60° sector nearest ``angle``; exact ties go anticlockwise."""
    return math.floor(angle.radians / SECTOR_WIDTH + 0.5) % 6


def direction_of(angle: Angle) -> Direction:
    return SECTOR_DIRECTIONS[sector_of(angle)]


class Positioned(Protocol):
    def unit_move(self, forwards: bool) -> None: ...
    def turn(self, anticlockwise: bool) -> None: ...
    def step(self, dt: float) -> None: ...

    @property
    def pos(self) -> CubePoint: ...

    @property
    def angle(self) -> Angle: ...

    @property
    def target_pos(self) -> CubePoint: ...

    @property
    def target_angle(self) -> Angle: ...


class GridMover:
    """Mixin for entities that own a ``grid_pos``.

    Moves are resolved against the *target* angle, so a step issued while
    still turning goes where the entity is turning to.
    """

    grid_pos: TransitionedGridPos

    def unit_move(self, forwards: bool) -> None:
        offset = cube_dir(direction_of(self.grid_pos.target_angle))
        if not forwards:
            offset = -offset
        self.grid_pos.set_target_pos(self.grid_pos.target_pos + offset)

    def turn(self, anticlockwise: bool) -> None:
        if anticlockwise:
            self.grid_pos.inc_target_angle(SECTOR_WIDTH)
        else:
            self.grid_pos.dec_target_angle(SECTOR_WIDTH)

    def step(self, dt: float) -> None:
        self.grid_pos.step(dt)

    @property
    def pos(self) -> CubePoint:
        return self.grid_pos.pos

    @property
    def angle(self) -> Angle:
        return self.grid_pos.angle

    @property
    def target_pos(self) -> CubePoint:
        return self.grid_pos.target_pos

    @property
    def target_angle(self) -> Angle:
        return self.grid_pos.target_angle
