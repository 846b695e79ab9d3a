"""Edge-triggered key state fed by the host loop."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

from purple_cubes.components import Direction

if TYPE_CHECKING:
    from cubetick import TickContext, World


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    START = "start"
    RESTART = "restart"
    MENU = "menu"


# Resolution order for presses landing in the same tick.
DIRECTION_KEYS: dict[Key, Direction] = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}


class InputState:
    """Keys pressed since the last flush, plus keys currently held.

    Only ``just_pressed`` drives gameplay; a held key never repeats.
    """

    def __init__(self) -> None:
        self._pressed: set[Key] = set()
        self._held: set[Key] = set()

    def press(self, key: Key) -> None:
        """Record a key-down edge reported by the host."""
        self._pressed.add(key)
        self._held.add(key)

    def release(self, key: Key) -> None:
        self._held.discard(key)

    def just_pressed(self, key: Key) -> bool:
        return key in self._pressed

    def held(self, key: Key) -> bool:
        return key in self._held

    def flush(self) -> None:
        self._pressed.clear()

    def reset(self) -> None:
        self._pressed.clear()
        self._held.clear()


def make_input_flush_system(inputs: InputState) -> Callable[[World, TickContext], None]:
    """Return a system that ends the edge-triggered window for this tick."""

    def input_flush_system(world: World, ctx: TickContext) -> None:
        inputs.flush()

    return input_flush_system
