"""Tests for cube expiry."""
from purple_cubes.components import CubeColor, Direction


def test_purple_expiry_costs_five(field):
    eid = field.place(color=CubeColor.PURPLE, lifetime=1.0)
    for _ in range(3):
        field.engine.step(0.25)
    assert field.world.alive(eid)
    assert field.scorer.value == 0

    field.engine.step(0.25)
    assert not field.world.alive(eid)
    assert field.scorer.value == -5
    assert field.scorer.misses == 1


def test_non_purple_expiry_is_free(field):
    eid = field.place(color=CubeColor.NON_PURPLE, lifetime=0.5)
    field.engine.run(4, dt=0.25)
    assert not field.world.alive(eid)
    assert field.scorer.value == 0


def test_penalty_fires_once(field):
    field.place(color=CubeColor.PURPLE, lifetime=0.25)
    field.engine.run(20, dt=0.25)
    assert field.scorer.value == -5


def test_each_missed_cube_counts(field):
    for direction in Direction:
        field.place(direction=direction, color=CubeColor.PURPLE, lifetime=0.5)
    field.place(color=CubeColor.NON_PURPLE, lifetime=0.5)
    field.engine.run(2, dt=0.25)
    assert field.cubes() == []
    assert field.scorer.value == -20


def test_lifetimes_are_independent(field):
    early = field.place(lifetime=0.25)
    late = field.place(lifetime=0.75)
    field.engine.step(0.25)
    assert not field.world.alive(early)
    assert field.world.alive(late)
