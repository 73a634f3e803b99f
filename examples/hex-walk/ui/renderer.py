"""Hex field and player rendering."""
from __future__ import annotations

import pygame

from ahistorics import Scene, Viewport
from ahistorics_hex import matrix

from game.mapgen import HexField
from ui.constants import OUTLINE_W, PLAYER_SIZE

Color = tuple[int, int, int]

# Triangle pointing along the player's facing (screen-up at angle 0).
_PLAYER_TRIANGLE = ((0.0, -1.0), (-0.8, 0.7), (0.8, 0.7))


def to_rgb(color: tuple[float, float, float, float]) -> Color:
    r, g, b, _ = color
    return (round(r * 255), round(g * 255), round(b * 255))


def draw_field(
    surface: pygame.Surface,
    view: Viewport,
    scene: Scene,
    field: HexField,
    color: Color,
) -> None:
    """Draw every visible tile relative to the camera."""
    for cell, depth in field.items():
        center = view.project(cell, scene.camera)
        if not view.is_visible(center):
            continue
        pygame.draw.polygon(surface, color, view.hex_polygon(cell, scene.camera, depth))


def draw_player(
    surface: pygame.Surface,
    view: Viewport,
    scene: Scene,
    color: Color,
    outline: Color,
) -> None:
    """Draw the player as a triangle turned by its angle relative to the camera."""
    center = view.project(scene.player.pos, scene.camera)
    facing = scene.player.angle - scene.camera.angle
    to_screen = matrix.chain(
        matrix.scale_uni(view.scale_factor * PLAYER_SIZE),
        # Anticlockwise facing turns the marker left on a y-down screen.
        matrix.rot(-facing.radians),
        matrix.trans(center),
    )
    points = [matrix.transform_pos(to_screen, p) for p in _PLAYER_TRIANGLE]
    pygame.draw.polygon(surface, color, points)
    pygame.draw.polygon(surface, outline, points, OUTLINE_W)


def draw_status(surface: pygame.Surface, font: pygame.font.Font, scene: Scene, color: Color) -> None:
    target = scene.player.target_pos
    text = (
        f"cell q={target.q} r={target.r}   "
        f"facing {scene.player.target_angle.degrees:5.1f}   "
        "W/S move  A/D turn  Esc quit"
    )
    surface.blit(font.render(text, True, color), (10, 10))
