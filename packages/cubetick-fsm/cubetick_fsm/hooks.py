"""Per-state enter/update/exit hooks driven by an FSM component."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from cubetick_fsm.components import FSM

if TYPE_CHECKING:
    from cubetick import EntityId, TickContext, World

_Hook = Callable[["World", "TickContext"], None]


class StateHooks:
    """Registry of systems bound to the lifecycle of individual states.

    ``on_update`` systems only run while the machine sits in their state;
    ``transition`` is meant to be passed to ``make_fsm_system`` as the
    ``on_transition`` callback so exit and enter hooks fire on every edge.
    """

    def __init__(self) -> None:
        self._enter: dict[str, list[_Hook]] = {}
        self._update: dict[str, list[_Hook]] = {}
        self._exit: dict[str, list[_Hook]] = {}

    def on_enter(self, state: str, hook: _Hook) -> None:
        self._enter.setdefault(state, []).append(hook)

    def on_update(self, state: str, system: _Hook) -> None:
        self._update.setdefault(state, []).append(system)

    def on_exit(self, state: str, hook: _Hook) -> None:
        self._exit.setdefault(state, []).append(hook)

    def enter(self, world: World, ctx: TickContext, state: str) -> None:
        for hook in self._enter.get(state, ()):
            hook(world, ctx)

    def exit(self, world: World, ctx: TickContext, state: str) -> None:
        for hook in self._exit.get(state, ()):
            hook(world, ctx)

    def transition(
        self, world: World, ctx: TickContext, eid: EntityId, old: str, new: str
    ) -> None:
        self.exit(world, ctx, old)
        self.enter(world, ctx, new)

    def make_update_system(self, fsm_eid: EntityId) -> Callable[[World, TickContext], None]:
        """Return a system running the update systems of the current state."""

        def update_system(world: World, ctx: TickContext) -> None:
            if not world.alive(fsm_eid):
                return
            state = world.get(fsm_eid, FSM).state
            for system in self._update.get(state, ()):
                system(world, ctx)

        return update_system
