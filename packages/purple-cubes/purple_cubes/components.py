"""Game components for cubes and the spawner."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Travel direction. The playfield origin is its centre and y grows upward."""

    UP = (0.0, 1.0)
    DOWN = (0.0, -1.0)
    LEFT = (-1.0, 0.0)
    RIGHT = (1.0, 0.0)

    @property
    def vector(self) -> tuple[float, float]:
        return self.value


class CubeColor(Enum):
    PURPLE = "purple"
    NON_PURPLE = "non_purple"


@dataclass
class Cube:
    """A live cube. direction and color never change after spawn."""

    direction: Direction
    color: CubeColor
    speed: float  # units per second
    size: float

    @property
    def purple(self) -> bool:
        return self.color is CubeColor.PURPLE


@dataclass
class Position:
    x: float = 0.0
    y: float = 0.0


@dataclass
class Spawner:
    """Marks the spawner entity; its repeating Timer sits on the same entity."""

    spawned: int = 0
