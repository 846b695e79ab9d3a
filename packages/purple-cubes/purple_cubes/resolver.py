"""Arrow-key presses resolved against live cubes."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from purple_cubes.components import Cube
from purple_cubes.input import DIRECTION_KEYS, InputState
from purple_cubes.scoring import Scorer

if TYPE_CHECKING:
    from cubetick import TickContext, World
    from cubetick_signal import SignalBus

logger = logging.getLogger(__name__)


def make_resolver_system(
    inputs: InputState, scorer: Scorer, bus: SignalBus | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that scores and removes cubes matching pressed keys.

    Every live cube travelling in the pressed direction is resolved by one
    press. A press with no such cube changes nothing.
    """

    def resolver_system(world: World, ctx: TickContext) -> None:
        for key, direction in DIRECTION_KEYS.items():
            if not inputs.just_pressed(key):
                continue
            for eid, (cube,) in world.query(Cube):
                if cube.direction is not direction:
                    continue
                world.despawn(eid)
                if cube.purple:
                    score = scorer.reward()
                    signal = "cube_hit"
                else:
                    score = scorer.penalize()
                    signal = "cube_wrong"
                logger.debug("%s on cube %d (%s), score %d", signal, eid,
                             direction.name, score)
                if bus is not None:
                    bus.publish(signal, eid=eid, direction=direction, score=score)

    return resolver_system
