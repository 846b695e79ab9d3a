"""Tests for engine lifecycle, delta stepping, and ordering."""

import pytest

from cubetick.engine import Engine
from cubetick.world import World


# --- Initialization ---

def test_engine_init_defaults():
    engine = Engine()
    assert engine.clock.tps == 60
    assert engine.clock.tick_number == 0
    assert isinstance(engine.world, World)


def test_engine_seed_is_kept():
    engine = Engine(seed=7)
    assert engine.seed == 7


def test_engine_random_seed_when_omitted():
    assert isinstance(Engine().seed, int)


# --- System registration ---

def test_systems_run_in_order():
    engine = Engine()
    order = []

    engine.add_system(lambda w, c: order.append("first"))
    engine.add_system(lambda w, c: order.append("second"))
    engine.add_system(lambda w, c: order.append("third"))
    engine.step()
    assert order == ["first", "second", "third"]


# --- step() ---

def test_step_uses_host_delta():
    engine = Engine(tps=60)
    seen = []
    engine.add_system(lambda w, c: seen.append((c.tick_number, c.dt, c.elapsed)))

    engine.step(0.25)
    engine.step(0.5)
    assert seen == [(1, 0.25, 0.25), (2, 0.5, 0.75)]


def test_step_without_delta_uses_nominal_step():
    engine = Engine(tps=4)
    seen = []
    engine.add_system(lambda w, c: seen.append(c.dt))
    engine.step()
    assert seen == [0.25]


def test_step_rejects_negative_delta():
    engine = Engine()
    with pytest.raises(ValueError):
        engine.step(-0.1)


def test_step_does_not_call_hooks():
    engine = Engine()
    hooks = []
    engine.on_start(lambda w, c: hooks.append("start"))
    engine.on_stop(lambda w, c: hooks.append("stop"))
    engine.step()
    assert hooks == []


# --- start() / stop() ---

def test_start_fires_hooks_once():
    engine = Engine()
    hooks = []
    engine.on_start(lambda w, c: hooks.append("start"))
    engine.start()
    engine.start()
    assert hooks == ["start"]
    assert engine.started


def test_stop_without_start_is_noop():
    engine = Engine()
    hooks = []
    engine.on_stop(lambda w, c: hooks.append("stop"))
    engine.stop()
    assert hooks == []


# --- run() ---

def test_run_calls_hooks_around_ticks():
    engine = Engine()
    events = []
    engine.on_start(lambda w, c: events.append("start"))
    engine.add_system(lambda w, c: events.append(c.tick_number))
    engine.on_stop(lambda w, c: events.append("stop"))
    engine.run(3, dt=0.5)
    assert events == ["start", 1, 2, 3, "stop"]
    assert engine.clock.elapsed == 1.5


def test_request_stop_skips_remaining_systems_and_ticks():
    engine = Engine()
    calls = []

    def stopper(world, ctx):
        calls.append(("stopper", ctx.tick_number))
        if ctx.tick_number == 2:
            ctx.request_stop()

    engine.add_system(stopper)
    engine.add_system(lambda w, c: calls.append(("after", c.tick_number)))
    engine.run(10)

    assert calls == [
        ("stopper", 1),
        ("after", 1),
        ("stopper", 2),
    ]
    assert engine.clock.tick_number == 2


# --- RNG ---

def test_same_seed_same_draws():
    def collect(seed):
        engine = Engine(seed=seed)
        out = []
        engine.add_system(lambda w, c: out.append(c.random.random()))
        engine.run(20)
        return out

    assert collect(123) == collect(123)
    assert collect(123) != collect(456)
