"""Build the complete game state."""
from __future__ import annotations

from dataclasses import dataclass

from cubetick import Engine
from cubetick_signal import SignalBus, make_signal_system

from purple_cubes import constants as C
from purple_cubes.config import GameConfig
from purple_cubes.input import InputState, make_input_flush_system
from purple_cubes.lifetime import make_reaper_system
from purple_cubes.movement import movement_system
from purple_cubes.resolver import make_resolver_system
from purple_cubes.rounds import RoundController, RoundState
from purple_cubes.scoring import Scorer
from purple_cubes.screen import ScreenQuery
from purple_cubes.spawner import create_spawner, make_spawner_system


@dataclass
class GameState:
    """Holds the engine and the shared state systems read and write."""

    engine: Engine
    bus: SignalBus
    inputs: InputState
    scorer: Scorer
    rounds: RoundController
    config: GameConfig

    @property
    def state(self) -> RoundState:
        return self.rounds.state

    def step(self, dt: float) -> None:
        self.engine.step(dt)


def build_game(
    screen: ScreenQuery,
    config: GameConfig | None = None,
    seed: int | None = None,
    tps: int = C.TPS,
) -> GameState:
    """Wire every system in tick order and enter the initial round state.

    Order inside a round: spawner, mover, input resolver, lifetime reaper,
    round timer. After that the FSM may switch state, the tick's key presses
    are dropped, and queued signals are delivered.
    """
    config = (config or GameConfig()).validate()
    engine = Engine(tps=tps, seed=seed)
    world = engine.world
    bus = SignalBus()
    inputs = InputState()
    scorer = Scorer(reward=config.hit_reward, penalty=config.miss_penalty)

    spawner_eid = create_spawner(world, config)
    rounds = RoundController(world, config, scorer, inputs, spawner_eid, bus=bus)

    rounds.add_round_system(make_spawner_system(config, screen, bus=bus))
    rounds.add_round_system(movement_system)
    rounds.add_round_system(make_resolver_system(inputs, scorer, bus=bus))
    rounds.add_round_system(make_reaper_system(scorer, bus=bus))
    rounds.add_round_system(rounds.round_timer_system)

    engine.add_system(rounds.make_update_system())
    engine.add_system(rounds.make_fsm_system())
    engine.add_system(make_input_flush_system(inputs))
    engine.add_system(make_signal_system(bus))
    engine.on_start(rounds.start)
    engine.start()

    return GameState(
        engine=engine,
        bus=bus,
        inputs=inputs,
        scorer=scorer,
        rounds=rounds,
        config=config,
    )
