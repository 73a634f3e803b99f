"""Settings - colors, animation timings and view options from TOML."""
from __future__ import annotations

import logging
import string
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

from ahistorics.types import SettingsError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "ahistorics_settings.toml"

Color = tuple[float, float, float, float]


def hex_to_color(hex_str: str) -> Color:
    """Parse ``#rrggbb`` or ``#rrggbbaa`` into RGBA floats in ``[0, 1]``."""
    digits = hex_str[1:] if hex_str.startswith("#") else hex_str
    if len(digits) not in (6, 8):
        raise SettingsError(f"{hex_str!r} must have 6 or 8 hex digits")
    if not all(ch in string.hexdigits for ch in digits):
        raise SettingsError(f"{hex_str!r} is not a hex color")
    value = int(digits, 16)

    if len(digits) == 8:
        r = value >> 24 & 0xFF
        g = value >> 16 & 0xFF
        b = value >> 8 & 0xFF
        a = value & 0xFF
        return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    r = value >> 16 & 0xFF
    g = value >> 8 & 0xFF
    b = value & 0xFF
    return (r / 255.0, g / 255.0, b / 255.0, 1.0)


@dataclass(frozen=True)
class Colors:
    background_color: Color
    foreground_color: Color
    player_color: Color
    player_outline_color: Color


@dataclass(frozen=True)
class Timing:
    """Update rate and per-entity transition durations.

    Attributes:
        ups: Fixed updates per second.
        camera_anim_time: Seconds for the camera to finish one step or turn.
        player_anim_time: Seconds for the player to finish one step or turn.
    """

    ups: int = 60
    camera_anim_time: float = 0.4
    player_anim_time: float = 0.25


@dataclass(frozen=True)
class ViewSettings:
    hex_scaled_height: float = 12.0
    spacing: float = 0.875


@dataclass(frozen=True)
class Settings:
    colors: Colors
    timing: Timing = field(default_factory=Timing)
    view: ViewSettings = field(default_factory=ViewSettings)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Settings:
        raw_colors = raw.get("colors")
        if not isinstance(raw_colors, dict):
            raise SettingsError("Missing [colors] table")

        color_values: dict[str, Color] = {}
        for f in fields(Colors):
            if f.name not in raw_colors:
                raise SettingsError(f"Missing colors.{f.name}")
            color_values[f.name] = hex_to_color(str(raw_colors[f.name]))

        timing = _build_section(Timing, raw.get("timing", {}), "timing")
        view = _build_section(ViewSettings, raw.get("view", {}), "view")

        if not isinstance(timing.ups, int):
            raise SettingsError("timing.ups must be a whole number")
        if timing.ups <= 0:
            raise SettingsError("timing.ups must be positive")
        if timing.camera_anim_time <= 0 or timing.player_anim_time <= 0:
            raise SettingsError("Animation times must be positive")
        if view.hex_scaled_height <= 0:
            raise SettingsError("view.hex_scaled_height must be positive")

        return cls(colors=Colors(**color_values), timing=timing, view=view)


def _build_section(cls: type, raw: Any, name: str) -> Any:
    if not isinstance(raw, dict):
        raise SettingsError(f"[{name}] must be a table")
    unknown = set(raw) - {f.name for f in fields(cls)}
    if unknown:
        raise SettingsError(f"Unknown keys in [{name}]: {', '.join(sorted(unknown))}")
    values: dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SettingsError(f"{name}.{key} must be a number")
        values[key] = value
    return cls(**values)


def load_settings(path: str | Path) -> Settings:
    path = Path(path)
    try:
        with path.open("rb") as fh:
            raw = tomllib.load(fh)
    except FileNotFoundError as exc:
        raise SettingsError(f"No settings file at {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise SettingsError(f"Malformed settings file {path}: {exc}") from exc
    logger.debug("Loaded settings from %s", path)
    return Settings.from_dict(raw)


def find_settings(path: str | Path = SETTINGS_FILENAME) -> Settings:
    """Load ``path``, or the same file name from the nearest ancestor dir."""
    path = Path(path)
    if path.is_file():
        return load_settings(path)

    filename = path.name
    if not filename:
        raise SettingsError(f"{path} does not name a file")

    for parent in path.resolve().parent.parents:
        candidate = parent / filename
        if candidate.is_file():
            logger.info("Using settings from %s", candidate)
            return load_settings(candidate)

    raise SettingsError(
        f"No file named {filename!r} found in {path.parent} or any of its ancestors"
    )
