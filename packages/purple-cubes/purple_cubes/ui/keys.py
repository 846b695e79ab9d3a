"""Pygame key codes mapped to game keys."""
from __future__ import annotations

import pygame

from purple_cubes.input import Key

KEY_MAP: dict[int, Key] = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.START,
    pygame.K_RETURN: Key.START,
    pygame.K_r: Key.RESTART,
    pygame.K_m: Key.MENU,
}


def translate(key_code: int) -> Key | None:
    return KEY_MAP.get(key_code)
