"""Purple Cubes: arrow-key reaction game.

Controls:
  Arrows        Hit purple cubes travelling in that direction
  Space/Enter   Start a round (menu)
  R             Play again (results)
  M             Back to the menu (results)
  Esc           Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from purple_cubes import constants as C
from purple_cubes.config import ConfigError, GameConfig
from purple_cubes.events import attach_logging
from purple_cubes.rounds import RoundState
from purple_cubes.screen import MissingSurfaceError, ScreenSize
from purple_cubes.setup import build_game
from purple_cubes.ui.feedback import FeedbackStrip
from purple_cubes.ui.keys import translate
from purple_cubes.ui.render import draw_cubes, draw_hud, draw_menu, draw_results

logger = logging.getLogger("purple_cubes")


def _frame_cap(value: str) -> int:
    cap = int(value)
    if cap < 0:
        raise argparse.ArgumentTypeError(f"frame cap must be 0 or more, got {cap}")
    return cap


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="purple-cubes", description="Purple Cubes reaction game")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--width", type=int, default=C.SCREEN_W, help=f"Window width (default: {C.SCREEN_W})")
    p.add_argument("--height", type=int, default=C.SCREEN_H, help=f"Window height (default: {C.SCREEN_H})")
    p.add_argument("--fps", type=_frame_cap, default=C.FPS,
                   help=f"Frame cap, 0 for uncapped (default: {C.FPS})")
    p.add_argument("--round-seconds", type=float, default=C.ROUND_SECONDS,
                   help=f"Round length in seconds (default: {C.ROUND_SECONDS:g})")
    p.add_argument("--skip-menu", action="store_true", help="Start straight into a round")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    return p.parse_args(argv)


def _surface_size() -> ScreenSize | None:
    surface = pygame.display.get_surface()
    if surface is None:
        return None
    width, height = surface.get_size()
    return float(width), float(height)


def run(args: argparse.Namespace) -> None:
    config = GameConfig(round_seconds=args.round_seconds, skip_menu=args.skip_menu)

    pygame.init()
    try:
        pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
        pygame.display.set_caption(C.TITLE)
        clock = pygame.time.Clock()
        font = pygame.font.SysFont("monospace", 20)
        big_font = pygame.font.SysFont("monospace", 48, bold=True)

        state = build_game(_surface_size, config=config, seed=args.seed)
        logger.info("seed %d", state.engine.seed)
        attach_logging(state.bus)
        feedback = FeedbackStrip()
        feedback.subscribe(state.bus)

        running = True
        while running:
            dt = clock.tick(args.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif (key := translate(event.key)) is not None:
                        state.inputs.press(key)
                elif event.type == pygame.KEYUP:
                    if (key := translate(event.key)) is not None:
                        state.inputs.release(key)

            state.step(dt)
            feedback.update(dt)

            screen = pygame.display.get_surface()
            screen.fill(C.BG_COLOR)
            current = state.state
            if current is RoundState.MENU:
                draw_menu(screen, big_font, font)
            elif current is RoundState.DURING_ROUND:
                draw_cubes(screen, state.engine.world)
                draw_hud(screen, font, state.scorer, state.rounds)
                feedback.draw(screen, font, 16, 40)
            else:
                draw_results(screen, big_font, font, state.scorer, state.rounds)
            pygame.display.flip()

        state.engine.stop()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except ConfigError as exc:
        logger.error("invalid configuration: %s", exc)
        return 2
    except MissingSurfaceError as exc:
        logger.critical("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
