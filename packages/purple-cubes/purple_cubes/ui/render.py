"""Drawing for cubes, HUD, menu, and results screens."""
from __future__ import annotations

import pygame

from cubetick import World

from purple_cubes.components import Cube, CubeColor, Position
from purple_cubes.constants import (
    INSTRUCTIONS,
    MENU_HINT,
    NON_PURPLE,
    PURPLE,
    TEXT_COLOR,
    TEXT_DIM,
    TIMER_BAR_BG,
    TIMER_BAR_FG,
    TITLE,
)
from purple_cubes.rounds import RoundController
from purple_cubes.scoring import Scorer

CUBE_COLORS = {
    CubeColor.PURPLE: PURPLE,
    CubeColor.NON_PURPLE: NON_PURPLE,
}


def to_screen(x: float, y: float, width: int, height: int) -> tuple[float, float]:
    """Playfield coordinates (origin centre, y up) to pixels."""
    return width / 2 + x, height / 2 - y


def draw_cubes(surface: pygame.Surface, world: World) -> None:
    width, height = surface.get_size()
    for eid, (pos, cube) in world.query(Position, Cube):
        cx, cy = to_screen(pos.x, pos.y, width, height)
        half = cube.size / 2
        rect = pygame.Rect(int(cx - half), int(cy - half), int(cube.size), int(cube.size))
        pygame.draw.rect(surface, CUBE_COLORS[cube.color], rect)


def _blit_centered(surface: pygame.Surface, font: pygame.font.Font, text: str,
                   color: tuple[int, int, int], y: int) -> int:
    label = font.render(text, True, color)
    surface.blit(label, (surface.get_width() // 2 - label.get_width() // 2, y))
    return y + label.get_height()


def draw_hud(surface: pygame.Surface, font: pygame.font.Font,
             scorer: Scorer, rounds: RoundController) -> None:
    surface.blit(font.render(scorer.display, True, TEXT_COLOR), (16, 12))

    width = surface.get_width()
    timer = rounds.round_timer
    label = font.render(f"{timer.remaining:4.1f}s", True, TEXT_DIM)
    surface.blit(label, (width - label.get_width() - 16, 12))

    # Countdown bar along the top edge
    pygame.draw.rect(surface, TIMER_BAR_BG, (0, 0, width, 4))
    pygame.draw.rect(surface, TIMER_BAR_FG, (0, 0, int(width * (1.0 - timer.fraction)), 4))


def draw_menu(surface: pygame.Surface, big_font: pygame.font.Font,
              font: pygame.font.Font) -> None:
    y = surface.get_height() // 3
    y = _blit_centered(surface, big_font, TITLE, PURPLE, y) + 24
    for line in (
        "Press the arrow matching a purple cube's direction before it fades.",
        "Hit: +1    Wrong colour or missed purple: -5",
    ):
        y = _blit_centered(surface, font, line, TEXT_COLOR, y) + 6
    _blit_centered(surface, font, MENU_HINT, TEXT_DIM, y + 24)


def draw_results(surface: pygame.Surface, big_font: pygame.font.Font,
                 font: pygame.font.Font, scorer: Scorer,
                 rounds: RoundController) -> None:
    y = surface.get_height() // 3
    y = _blit_centered(surface, big_font, scorer.display, TEXT_COLOR, y) + 16
    if rounds.result_message:
        y = _blit_centered(surface, font, rounds.result_message, PURPLE, y) + 12
    tally = f"Hits {scorer.hits}   Wrong {scorer.wrong}   Missed {scorer.misses}"
    y = _blit_centered(surface, font, tally, TEXT_DIM, y) + 24
    _blit_centered(surface, font, INSTRUCTIONS, TEXT_COLOR, y)
