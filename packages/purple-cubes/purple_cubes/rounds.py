"""Round state machine: menu, play, and results."""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from cubetick_fsm import FSM, FSMGuards, StateHooks, make_fsm_system
from cubetick_schedule import Timer

from purple_cubes.components import Cube
from purple_cubes.config import GameConfig
from purple_cubes.input import InputState, Key
from purple_cubes.messages import pick_message
from purple_cubes.scoring import Scorer
from purple_cubes.spawner import reset_spawner

if TYPE_CHECKING:
    from cubetick import EntityId, System, TickContext, World
    from cubetick_signal import SignalBus

logger = logging.getLogger(__name__)


class RoundState(str, Enum):
    MENU = "menu"
    DURING_ROUND = "during_round"
    AFTER_ROUND = "after_round"


TRANSITIONS: dict[str, list[list[str]]] = {
    RoundState.MENU.value: [["start_pressed", RoundState.DURING_ROUND.value]],
    RoundState.DURING_ROUND.value: [["round_over", RoundState.AFTER_ROUND.value]],
    RoundState.AFTER_ROUND.value: [
        ["restart_pressed", RoundState.DURING_ROUND.value],
        ["menu_pressed", RoundState.MENU.value],
    ],
}


class RoundController:
    """Owns the round timer, the results text, and the round FSM entity.

    Entering a round clears the score and every leftover cube; leaving it
    despawns whatever cubes are still alive.
    """

    def __init__(
        self,
        world: World,
        config: GameConfig,
        scorer: Scorer,
        inputs: InputState,
        spawner_eid: EntityId,
        bus: SignalBus | None = None,
    ) -> None:
        self._world = world
        self._config = config
        self._scorer = scorer
        self._inputs = inputs
        self._spawner_eid = spawner_eid
        self._bus = bus
        self.round_timer = Timer(name="round", duration=config.round_seconds)
        self.result_message: str | None = None
        self.rounds_played = 0

        initial = RoundState.DURING_ROUND if config.skip_menu else RoundState.MENU
        self._initial = initial
        self.eid = world.spawn()
        world.attach(self.eid, FSM(state=initial.value, transitions=TRANSITIONS))

        self.guards = FSMGuards()
        self.guards.register("start_pressed", lambda w, e: inputs.just_pressed(Key.START))
        self.guards.register("restart_pressed", lambda w, e: inputs.just_pressed(Key.RESTART))
        self.guards.register("menu_pressed", lambda w, e: inputs.just_pressed(Key.MENU))
        self.guards.register("round_over", lambda w, e: self.round_timer.just_finished)
        self.guards.require(TRANSITIONS)

        self.hooks = StateHooks()
        self.hooks.on_enter(RoundState.DURING_ROUND.value, self._enter_round)
        self.hooks.on_exit(RoundState.DURING_ROUND.value, self._exit_round)
        self.hooks.on_enter(RoundState.AFTER_ROUND.value, self._enter_results)
        self.hooks.on_exit(RoundState.AFTER_ROUND.value, self._exit_results)

    @property
    def state(self) -> RoundState:
        return RoundState(self._world.get(self.eid, FSM).state)

    @property
    def time_left(self) -> float:
        return self.round_timer.remaining

    def add_round_system(self, system: System) -> None:
        """Register a system that only runs while a round is in progress."""
        self.hooks.on_update(RoundState.DURING_ROUND.value, system)

    def make_update_system(self) -> System:
        return self.hooks.make_update_system(self.eid)

    def make_fsm_system(self) -> System:
        return make_fsm_system(self.guards, on_transition=self._on_transition)

    def round_timer_system(self, world: World, ctx: TickContext) -> None:
        self.round_timer.tick(ctx.dt)

    def start(self, world: World, ctx: TickContext) -> None:
        """Run the enter hooks of the initial state; an engine start hook."""
        self.hooks.enter(world, ctx, self._initial.value)

    def _on_transition(
        self, world: World, ctx: TickContext, eid: EntityId, old: str, new: str
    ) -> None:
        logger.debug("round state %s -> %s", old, new)
        self.hooks.transition(world, ctx, eid, old, new)

    # -- hooks --

    def _enter_round(self, world: World, ctx: TickContext) -> None:
        self._scorer.reset()
        self.round_timer.set_duration(self._config.round_seconds)
        self.round_timer.reset()
        reset_spawner(world, self._spawner_eid, self._config)
        world.despawn_all(Cube)
        self.result_message = None
        self.rounds_played += 1
        logger.info("round %d started (%.0fs)", self.rounds_played,
                    self._config.round_seconds)
        if self._bus is not None:
            self._bus.publish("round_started", round=self.rounds_played)

    def _exit_round(self, world: World, ctx: TickContext) -> None:
        removed = world.despawn_all(Cube)
        logger.debug("cleared %d cubes at round end", removed)

    def _enter_results(self, world: World, ctx: TickContext) -> None:
        score = self._scorer.value
        self.result_message = pick_message(score, ctx.random)
        logger.info("round %d over: score %d (hits=%d wrong=%d misses=%d)",
                    self.rounds_played, score, self._scorer.hits,
                    self._scorer.wrong, self._scorer.misses)
        if self._bus is not None:
            self._bus.publish("round_ended", round=self.rounds_played, score=score,
                              message=self.result_message)

    def _exit_results(self, world: World, ctx: TickContext) -> None:
        self.result_message = None
