"""ahistorics - A hex-grid walking game built on eased grid movement."""

from ahistorics.clock import Clock
from ahistorics.controls import DEFAULT_KEYMAP, Controls, Intent, apply_intent
from ahistorics.engine import Engine
from ahistorics.entities import Camera, Player
from ahistorics.scene import Scene
from ahistorics.settings import (
    SETTINGS_FILENAME,
    Colors,
    Settings,
    Timing,
    ViewSettings,
    find_settings,
    hex_to_color,
    load_settings,
)
from ahistorics.types import SettingsError, System, TickContext
from ahistorics.view import Viewport

__all__ = [
    "Clock",
    "DEFAULT_KEYMAP",
    "Controls",
    "Intent",
    "apply_intent",
    "Engine",
    "Camera",
    "Player",
    "Scene",
    "SETTINGS_FILENAME",
    "Colors",
    "Settings",
    "Timing",
    "ViewSettings",
    "find_settings",
    "hex_to_color",
    "load_settings",
    "SettingsError",
    "System",
    "TickContext",
    "Viewport",
]
