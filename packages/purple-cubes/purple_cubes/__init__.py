"""purple-cubes - Press the arrow matching each purple cube before it fades."""
from __future__ import annotations

from purple_cubes.components import Cube, CubeColor, Direction, Position, Spawner
from purple_cubes.config import ConfigError, GameConfig
from purple_cubes.input import InputState, Key
from purple_cubes.rounds import RoundController, RoundState
from purple_cubes.scoring import Scorer
from purple_cubes.screen import MissingSurfaceError
from purple_cubes.setup import GameState, build_game

__all__ = [
    "Cube",
    "CubeColor",
    "Direction",
    "Position",
    "Spawner",
    "GameConfig",
    "ConfigError",
    "InputState",
    "Key",
    "RoundController",
    "RoundState",
    "Scorer",
    "MissingSurfaceError",
    "GameState",
    "build_game",
]
