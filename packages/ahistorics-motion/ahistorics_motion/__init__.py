"""ahistorics-motion - Eased movement and turning between hex cells."""
from __future__ import annotations

from ahistorics_motion.easing import Easing, bezier2, linear, transition_ease
from ahistorics_motion.mover import (
    SECTOR_DIRECTIONS,
    SECTOR_WIDTH,
    GridMover,
    Positioned,
    direction_of,
    sector_of,
)
from ahistorics_motion.systems import make_transition_system
from ahistorics_motion.transition import TransitionedGridPos

__all__ = [
    "Easing",
    "bezier2",
    "linear",
    "transition_ease",
    "SECTOR_DIRECTIONS",
    "SECTOR_WIDTH",
    "GridMover",
    "Positioned",
    "direction_of",
    "sector_of",
    "make_transition_system",
    "TransitionedGridPos",
]
