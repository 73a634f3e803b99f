"""TransitionedGridPos - eased position and facing between hex cells."""
from __future__ import annotations

from ahistorics_hex import Angle, CubePoint, cube_lerp, cube_round

from ahistorics_motion.easing import Easing, transition_ease


class TransitionedGridPos:
    """Position and angle that glide toward discrete targets.

    Position and angle are animated independently. Each keeps the seconds
    elapsed since it was last retargeted: once that reaches ``anim_time``
    the value sits exactly on its target, before that a transition from
    ``prev_*`` to ``target_*`` is under way. The value lands on its target
    in the same step that the summed ``dt`` reaches ``anim_time``.
    Retargeting always starts from the current interpolated value, so a
    mid-flight change of target never makes the value jump.
    """

    def __init__(
        self,
        anim_time: float,
        start_pos: CubePoint,
        start_angle: Angle | None = None,
        easing: Easing = transition_ease,
    ) -> None:
        if anim_time <= 0:
            raise ValueError(f"anim_time must be positive, got {anim_time}")
        if start_angle is None:
            start_angle = Angle(0.0)

        self._anim_time = anim_time
        self._easing = easing

        self._pos = start_pos.cast()
        self._target_pos = cube_round(start_pos)
        self._prev_pos = self._pos
        self._pos_elapsed = anim_time

        self._angle = start_angle
        self._target_angle = start_angle
        self._prev_angle = start_angle
        self._angle_elapsed = anim_time

    @property
    def anim_time(self) -> float:
        return self._anim_time

    @property
    def pos(self) -> CubePoint:
        return self._pos

    @property
    def target_pos(self) -> CubePoint:
        return self._target_pos

    @property
    def prev_pos(self) -> CubePoint:
        return self._prev_pos

    @property
    def pos_progress(self) -> float:
        return self._pos_elapsed / self._anim_time

    @property
    def angle(self) -> Angle:
        return self._angle

    @property
    def target_angle(self) -> Angle:
        return self._target_angle

    @property
    def prev_angle(self) -> Angle:
        return self._prev_angle

    @property
    def angle_progress(self) -> float:
        return self._angle_elapsed / self._anim_time

    @property
    def is_moving(self) -> bool:
        return self._pos != self._target_pos

    @property
    def is_turning(self) -> bool:
        return self._angle != self._target_angle

    def set_target_pos(self, target: CubePoint) -> None:
        if not target.is_valid():
            raise ValueError(f"{target} is not a hex cell")
        self._pos_elapsed = 0.0
        self._prev_pos = self._pos
        self._target_pos = target

    def inc_target_angle(self, increment: Angle | float) -> None:
        self._angle_elapsed = 0.0
        self._prev_angle = self._angle
        self._target_angle = self._target_angle + increment

    def dec_target_angle(self, decrement: Angle | float) -> None:
        self._angle_elapsed = 0.0
        self._prev_angle = self._angle
        self._target_angle = self._target_angle - decrement

    def step(self, dt: float) -> None:
        if dt < 0:
            raise ValueError(f"dt must not be negative, got {dt}")
        self._step_pos(dt)
        self._step_angle(dt)

    def _step_pos(self, dt: float) -> None:
        target = self._target_pos.cast()
        if self._pos == target:
            return

        if self._pos_elapsed >= self._anim_time:
            # Nothing was easing toward this target; take it outright.
            self._pos_elapsed = dt
            self._pos = target
            self._prev_pos = target
            return

        self._pos_elapsed += dt
        if self._pos_elapsed >= self._anim_time:
            self._pos = target
            return

        t = self._easing(self._pos_elapsed / self._anim_time)
        self._pos = cube_lerp(self._prev_pos, target, t)

    def _step_angle(self, dt: float) -> None:
        if self._angle == self._target_angle:
            return

        if self._angle_elapsed >= self._anim_time:
            self._angle_elapsed = dt
            self._angle = self._target_angle
            self._prev_angle = self._angle
            return

        self._angle_elapsed += dt
        if self._angle_elapsed >= self._anim_time:
            self._angle = self._target_angle
            return

        t = self._easing(self._angle_elapsed / self._anim_time)
        self._angle = self._prev_angle.lerp(self._target_angle, t)

    def __repr__(self) -> str:
        return (
            f"TransitionedGridPos(pos={self._pos!r}, target_pos={self._target_pos!r}, "
            f"angle={self._angle!r}, target_angle={self._target_angle!r})"
        )
