"""Controls - held-key tracking and key to movement intent mapping."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Hashable, Mapping

from ahistorics_motion import Positioned

logger = logging.getLogger(__name__)


class Intent(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"


DEFAULT_KEYMAP: dict[Hashable, Intent] = {
    "w": Intent.FORWARD,
    "s": Intent.BACKWARD,
    "a": Intent.TURN_LEFT,
    "d": Intent.TURN_RIGHT,
}


def apply_intent(intent: Intent, mover: Positioned) -> None:
    if intent is Intent.FORWARD:
        mover.unit_move(True)
    elif intent is Intent.BACKWARD:
        mover.unit_move(False)
    elif intent is Intent.TURN_LEFT:
        mover.turn(True)
    elif intent is Intent.TURN_RIGHT:
        mover.turn(False)


class Controls:
    """Turns key presses into intents, once per physical press.

    Keys are any hashable the input layer produces (pygame key names in
    the demo). A key that is already held is ignored until released, so
    keyboard auto-repeat never re-triggers a move.
    """

    def __init__(self, keymap: Mapping[Hashable, Intent] | None = None) -> None:
        self._keymap = dict(DEFAULT_KEYMAP if keymap is None else keymap)
        self._pressed: set[Hashable] = set()

    @property
    def keymap(self) -> Mapping[Hashable, Intent]:
        return self._keymap

    def is_pressed(self, key: Hashable) -> bool:
        return key in self._pressed

    def press(self, key: Hashable, *movers: Positioned) -> Intent | None:
        if key in self._pressed:
            return None
        self._pressed.add(key)

        intent = self._keymap.get(key)
        if intent is None:
            return None

        logger.debug("Key %r -> %s", key, intent.value)
        for mover in movers:
            apply_intent(intent, mover)
        return intent

    def release(self, key: Hashable) -> None:
        self._pressed.discard(key)
