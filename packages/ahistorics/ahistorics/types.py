"""Shared type aliases and errors for the ahistorics game loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float


class SettingsError(Exception):
    """Raised when a settings file is missing, unreadable or malformed."""


if TYPE_CHECKING:
    from ahistorics.scene import Scene

System = Callable[["Scene", TickContext], None]
