"""Hex Walk — walk and turn across a hex field with eased movement.

Exercises ahistorics, ahistorics-motion and ahistorics-hex.

Controls:
  W / S   Step forwards / backwards along the current facing
  A / D   Turn 60° left / right
  Esc     Quit

Colors and timings come from ``ahistorics_settings.toml``, looked up from
this directory upwards.
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import pygame

from ahistorics import (
    SETTINGS_FILENAME,
    Controls,
    Engine,
    Scene,
    Settings,
    SettingsError,
    Timing,
    ViewSettings,
    Viewport,
    find_settings,
)
from ahistorics_motion import make_transition_system

from game.mapgen import generate_field
from ui.constants import (
    BG_COLOR,
    FG_COLOR,
    FPS,
    MAP_RADIUS,
    PLAYER_COLOR,
    PLAYER_OUTLINE,
    SCREEN_H,
    SCREEN_W,
    TEXT_COLOR,
)
from ui.renderer import draw_field, draw_player, draw_status, to_rgb

logger = logging.getLogger("hex_walk")


class Palette:
    """Screen colors, from settings when available."""

    def __init__(self, settings: Settings | None) -> None:
        if settings is None:
            self.background = BG_COLOR
            self.foreground = FG_COLOR
            self.player = PLAYER_COLOR
            self.outline = PLAYER_OUTLINE
        else:
            colors = settings.colors
            self.background = to_rgb(colors.background_color)
            self.foreground = to_rgb(colors.foreground_color)
            self.player = to_rgb(colors.player_color)
            self.outline = to_rgb(colors.player_outline_color)


class GameState:
    """Holds the engine, scene, map and input state."""

    def __init__(self, settings: Settings | None) -> None:
        timing = settings.timing if settings is not None else Timing()
        view = settings.view if settings is not None else ViewSettings()

        self.scene = Scene.from_timing(timing)
        self.engine = Engine(self.scene, ups=timing.ups)
        self.engine.add_system(make_transition_system())

        self.view = Viewport.from_settings(SCREEN_W, SCREEN_H, view)
        self.field = generate_field(MAP_RADIUS)
        self.controls = Controls()
        self.palette = Palette(settings)

    def press(self, key_name: str) -> None:
        self.controls.press(key_name, self.scene.camera, self.scene.player)

    def release(self, key_name: str) -> None:
        self.controls.release(key_name)


def load_settings_or_default() -> Settings | None:
    try:
        return find_settings(Path(__file__).with_name(SETTINGS_FILENAME))
    except SettingsError as exc:
        logger.warning("Falling back to built-in settings: %s", exc)
        return None


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    state = GameState(load_settings_or_default())

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("ahistorics — hex walk")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    state.press(pygame.key.name(event.key))

            elif event.type == pygame.KEYUP:
                state.release(pygame.key.name(event.key))

        # --- Tick ---
        state.engine.advance(dt)

        # --- Render ---
        palette = state.palette
        screen.fill(palette.background)
        draw_field(screen, state.view, state.scene, state.field, palette.foreground)
        draw_player(screen, state.view, state.scene, palette.player, palette.outline)
        draw_status(screen, font, state.scene, TEXT_COLOR)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
