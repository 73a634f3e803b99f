"""System factory that advances every mover in a scene."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ahistorics import Scene, TickContext
    from ahistorics_motion.mover import Positioned


def make_transition_system(
    on_arrive: Callable[[Scene, TickContext, Positioned], None] | None = None,
) -> Callable[[Scene, TickContext], None]:
    def transition_system(scene: Scene, ctx: TickContext) -> None:
        for mover in scene.movers():
            was_moving = mover.pos != mover.target_pos
            mover.step(ctx.dt)
            if (
                on_arrive is not None
                and was_moving
                and mover.pos == mover.target_pos
            ):
                on_arrive(scene, ctx, mover)

    return transition_system
