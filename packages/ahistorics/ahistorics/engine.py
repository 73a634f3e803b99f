"""Engine - fixed-timestep update loop over a scene."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ahistorics.clock import Clock
from ahistorics.types import System

if TYPE_CHECKING:
    from ahistorics.scene import Scene

logger = logging.getLogger(__name__)

DEFAULT_UPS = 60
DEFAULT_MAX_TICKS_PER_ADVANCE = 10


class Engine:
    def __init__(
        self,
        scene: Scene,
        ups: int = DEFAULT_UPS,
        max_ticks_per_advance: int = DEFAULT_MAX_TICKS_PER_ADVANCE,
    ) -> None:
        if max_ticks_per_advance <= 0:
            raise ValueError("max_ticks_per_advance must be positive")
        self._scene = scene
        self._clock = Clock(ups)
        self._systems: list[System] = []
        self._max_ticks_per_advance = max_ticks_per_advance

    @property
    def scene(self) -> Scene:
        return self._scene

    @property
    def clock(self) -> Clock:
        return self._clock

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context()
        for system in self._systems:
            system(self._scene, ctx)

    def step(self) -> None:
        self._tick()

    def run(self, n: int) -> None:
        for _ in range(n):
            self._tick()

    def advance(self, real_elapsed: float) -> int:
        """Run as many ticks as ``real_elapsed`` seconds of frame time cover.

        Returns the number of ticks run. A backlog longer than
        ``max_ticks_per_advance`` ticks is dropped rather than replayed.
        """
        due = self._clock.accumulate(real_elapsed)
        if due > self._max_ticks_per_advance:
            logger.warning(
                "Dropping %d ticks of backlog (frame took %.3fs)",
                due - self._max_ticks_per_advance,
                real_elapsed,
            )
            due = self._max_ticks_per_advance
            self._clock.drop_banked()
        for _ in range(due):
            self._tick()
        return due
