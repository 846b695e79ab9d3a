"""System factory for timer processing."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cubetick_schedule.components import Timer

if TYPE_CHECKING:
    from cubetick import EntityId, TickContext, World


def make_timer_system(
    on_fire: Callable[[World, TickContext, EntityId, Timer], None],
    name: str | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that ticks Timers by ``ctx.dt`` and fires callbacks.

    When ``name`` is given only timers with that name are ticked, so several
    timer systems can sit at different points of the system order.
    """

    def timer_system(world: World, ctx: TickContext) -> None:
        for eid, (timer,) in world.query(Timer):
            if name is not None and timer.name != name:
                continue
            timer.tick(ctx.dt)
            if timer.just_finished:
                on_fire(world, ctx, eid, timer)

    return timer_system
