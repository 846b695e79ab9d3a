"""Shared fixtures for purple-cubes tests."""
from __future__ import annotations

import pytest

from cubetick import Engine
from cubetick_schedule import Timer

from purple_cubes.components import Cube, CubeColor, Direction, Position
from purple_cubes.config import GameConfig
from purple_cubes.input import InputState, make_input_flush_system
from purple_cubes.lifetime import make_reaper_system
from purple_cubes.movement import movement_system
from purple_cubes.resolver import make_resolver_system
from purple_cubes.scoring import Scorer
from purple_cubes.screen import fixed_screen
from purple_cubes.setup import build_game
from purple_cubes.spawner import LIFETIME_TIMER

SCREEN = fixed_screen(1000.0, 500.0)



def place_cube(world, direction=Direction.UP, color=CubeColor.PURPLE,
               speed=100.0, lifetime=1.0, size=50.0):
    eid = world.spawn()
    world.attach(eid, Cube(direction=direction, color=color, speed=speed, size=size))
    world.attach(eid, Position())
    world.attach(eid, Timer(name=LIFETIME_TIMER, duration=lifetime))
    return eid


class Playfield:
    """Resolver, mover, and reaper wired in round order without the FSM."""

    def __init__(self, seed: int = 1) -> None:
        self.engine = Engine(seed=seed)
        self.world = self.engine.world
        self.inputs = InputState()
        self.scorer = Scorer()
        self.engine.add_system(movement_system)
        self.engine.add_system(make_resolver_system(self.inputs, self.scorer))
        self.engine.add_system(make_reaper_system(self.scorer))
        self.engine.add_system(make_input_flush_system(self.inputs))

    def place(self, *args, **kwargs):
        return place_cube(self.world, *args, **kwargs)

    def press(self, *keys, dt: float = 0.25) -> None:
        for key in keys:
            self.inputs.press(key)
        self.engine.step(dt)
        for key in keys:
            self.inputs.release(key)

    def cubes(self):
        return [eid for eid, _ in self.world.query(Cube)]


@pytest.fixture
def field():
    return Playfield()


@pytest.fixture
def make_game():
    def _make(seed: int = 42, **overrides):
        return build_game(SCREEN, config=GameConfig(**overrides), seed=seed)

    return _make


@pytest.fixture
def place():
    return place_cube


@pytest.fixture
def screen():
    return SCREEN
