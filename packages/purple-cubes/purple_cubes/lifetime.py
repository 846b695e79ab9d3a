"""Cube expiry and the missed-cube penalty."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable

from cubetick_schedule import Timer, make_timer_system

from purple_cubes.components import Cube
from purple_cubes.scoring import Scorer
from purple_cubes.spawner import LIFETIME_TIMER

if TYPE_CHECKING:
    from cubetick import EntityId, TickContext, World
    from cubetick_signal import SignalBus

logger = logging.getLogger(__name__)


def make_reaper_system(
    scorer: Scorer, bus: SignalBus | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that ticks cube lifetimes and despawns expired cubes.

    An expiring purple cube costs the miss penalty; the cube is gone in the
    same step, so the penalty can only fire once.
    """

    def on_expire(world: World, ctx: TickContext, eid: EntityId, timer: Timer) -> None:
        if not world.has(eid, Cube):
            return
        cube = world.get(eid, Cube)
        world.despawn(eid)
        if cube.purple:
            score = scorer.penalize(missed=True)
            logger.debug("missed purple cube %d, score %d", eid, score)
            if bus is not None:
                bus.publish("cube_missed", eid=eid, direction=cube.direction, score=score)
        elif bus is not None:
            bus.publish("cube_expired", eid=eid, direction=cube.direction)

    return make_timer_system(on_expire, name=LIFETIME_TIMER)
