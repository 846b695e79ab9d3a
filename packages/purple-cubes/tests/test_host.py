"""Tests for the host-side glue: key mapping, coordinates, logging, CLI."""
import logging

import pygame
import pytest

from cubetick_signal import SignalBus

from purple_cubes import __main__ as host
from purple_cubes.__main__ import main, parse_args
from purple_cubes.components import Direction
from purple_cubes.events import attach_logging, detach_logging
from purple_cubes.input import Key
from purple_cubes.screen import MissingSurfaceError
from purple_cubes.ui.keys import translate
from purple_cubes.ui.render import to_screen


def test_arrow_keys_map_to_matching_directions():
    assert translate(pygame.K_UP) is Key.UP
    assert translate(pygame.K_DOWN) is Key.DOWN
    assert translate(pygame.K_LEFT) is Key.LEFT
    assert translate(pygame.K_RIGHT) is Key.RIGHT


def test_round_keys():
    assert translate(pygame.K_SPACE) is Key.START
    assert translate(pygame.K_r) is Key.RESTART
    assert translate(pygame.K_m) is Key.MENU
    assert translate(pygame.K_q) is None


def test_up_travel_moves_up_the_screen():
    dx, dy = Direction.UP.vector
    _, y0 = to_screen(0.0, 0.0, 800, 600)
    _, y1 = to_screen(dx * 10, dy * 10, 800, 600)
    assert y0 == 300
    assert y1 < y0


def test_origin_is_screen_centre():
    assert to_screen(0.0, 0.0, 800, 600) == (400, 300)


def test_signals_logged_at_debug(caplog):
    bus = SignalBus()
    attach_logging(bus)
    with caplog.at_level(logging.DEBUG, logger="purple_cubes.events"):
        bus.publish("cube_hit", direction=Direction.LEFT, score=3)
        bus.flush()
    assert "signal cube_hit direction=LEFT score=3" in caplog.text

    detach_logging(bus)
    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger="purple_cubes.events"):
        bus.publish("cube_hit", score=4)
        bus.flush()
    assert caplog.text == ""


def test_cli_defaults():
    args = parse_args([])
    assert args.round_seconds == 30.0
    assert not args.skip_menu
    assert args.log_level == "WARNING"


def test_cli_rejects_unknown_level():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "LOUD"])


def test_cli_frame_cap_zero_means_uncapped():
    assert parse_args(["--fps", "0"]).fps == 0
    assert parse_args([]).fps == 60


@pytest.mark.parametrize("value", ["-1", "fast"])
def test_cli_rejects_bad_frame_cap(value):
    with pytest.raises(SystemExit):
        parse_args(["--fps", value])


def test_frame_cap_is_not_the_engine_rate(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    calls = []

    def fake_build_game(screen, **kwargs):
        calls.append(kwargs)
        raise MissingSurfaceError("no window")

    monkeypatch.setattr(host, "build_game", fake_build_game)
    assert main(["--fps", "0", "--seed", "3"]) == 1
    assert len(calls) == 1
    assert "tps" not in calls[0]
    assert calls[0]["seed"] == 3
