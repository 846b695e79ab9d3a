"""System factory for FSM evaluation."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cubetick_fsm.components import FSM
from cubetick_fsm.guards import FSMGuards

if TYPE_CHECKING:
    from cubetick import EntityId, TickContext, World


def make_fsm_system(
    guards: FSMGuards,
    on_transition: Callable[[World, TickContext, EntityId, str, str], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that evaluates FSM transitions each tick.

    At most one transition fires per machine per tick.
    """

    def _find_transition(fsm: FSM, world: World, eid: int) -> str | None:
        for guard_name, target in fsm.transitions.get(fsm.state, ()):
            if guards.check(guard_name, world, eid):
                return target
        return None

    def fsm_system(world: World, ctx: TickContext) -> None:
        for eid, (fsm,) in world.query(FSM):
            target = _find_transition(fsm, world, eid)
            if target is None:
                continue
            old = fsm.state
            fsm.state = target
            if on_transition is not None:
                on_transition(world, ctx, eid, old, target)

    return fsm_system
