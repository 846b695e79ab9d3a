"""Types shared by the engine, its systems, and the game packages."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from cubetick.world import World

EntityId = int


@dataclass(frozen=True, slots=True)
class TickContext:
    """What a system sees of the current step.

    ``dt`` is the host-supplied frame delta in seconds and ``elapsed`` the
    sum of every delta so far. Systems draw randomness only from ``random``
    so a seeded engine replays identically.
    """

    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random


class DeadEntityError(KeyError):
    """An operation named an entity that was never spawned or is despawned."""

    def __init__(self, entity_id: EntityId, action: str) -> None:
        self.entity_id = entity_id
        self.action = action
        super().__init__(f"cannot {action}: entity {entity_id} is not alive")


System = Callable[["World", TickContext], None]
Predicate = Callable[["World", EntityId], bool]
