"""Clock - fixed update rate and wall-clock accumulation."""

from ahistorics.types import TickContext


class Clock:
    """Counts fixed-length ticks of ``1 / ups`` seconds.

    Wall-clock frame time fed through :meth:`accumulate` is banked until it
    covers whole ticks; the remainder carries over to the next frame.
    """

    def __init__(self, ups: int) -> None:
        if ups <= 0:
            raise ValueError("ups must be positive")
        self._ups = ups
        self._dt = 1.0 / ups
        self._tick_number = 0
        self._banked = 0.0

    @property
    def ups(self) -> int:
        return self._ups

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def banked(self) -> float:
        return self._banked

    def accumulate(self, real_elapsed: float) -> int:
        """Bank ``real_elapsed`` seconds and return how many ticks are due."""
        if real_elapsed < 0:
            raise ValueError("real_elapsed must not be negative")
        self._banked += real_elapsed
        due = int(self._banked // self._dt)
        self._banked -= due * self._dt
        return due

    def drop_banked(self) -> None:
        self._banked = 0.0

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._tick_number * self._dt,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._banked = 0.0
