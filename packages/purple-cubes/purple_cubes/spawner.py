"""Cube spawning on a randomized repeating timer."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable

from cubetick_schedule import Timer, TimerMode, make_timer_system

from purple_cubes.components import Cube, CubeColor, Direction, Position, Spawner
from purple_cubes.config import GameConfig
from purple_cubes.screen import ScreenQuery, query_size

if TYPE_CHECKING:
    from cubetick import EntityId, TickContext, World
    from cubetick_signal import SignalBus

logger = logging.getLogger(__name__)

SPAWN_TIMER = "spawn"
LIFETIME_TIMER = "lifetime"

_DIRECTIONS = tuple(Direction)


def create_spawner(world: World, config: GameConfig) -> EntityId:
    """Spawn the spawner entity with its repeating timer."""
    eid = world.spawn()
    world.attach(eid, Spawner())
    world.attach(
        eid,
        Timer(name=SPAWN_TIMER, duration=config.first_spawn_interval,
              mode=TimerMode.REPEATING),
    )
    return eid


def reset_spawner(world: World, eid: EntityId, config: GameConfig) -> None:
    """Rewind the spawner to its first interval for a fresh round."""
    timer = world.get(eid, Timer)
    timer.set_duration(config.first_spawn_interval)
    timer.reset()
    world.get(eid, Spawner).spawned = 0


def spawn_cube(
    world: World,
    rng: random.Random,
    config: GameConfig,
    screen: ScreenQuery,
) -> EntityId:
    """Spawn one cube at the origin with randomized color, direction and speed."""
    color = CubeColor.PURPLE if rng.random() < config.purple_chance else CubeColor.NON_PURPLE
    direction = rng.choice(_DIRECTIONS)
    width, height = query_size(screen)
    size = config.size_fraction * max(width, height)
    low, high = config.speed_range
    speed = rng.uniform(low * size, high * size)

    eid = world.spawn()
    world.attach(eid, Cube(direction=direction, color=color, speed=speed, size=size))
    world.attach(eid, Position())
    world.attach(eid, Timer(name=LIFETIME_TIMER, duration=config.cube_lifetime))
    return eid


def backdate_cube(world: World, eid: EntityId, lead: float) -> None:
    """Give back the first ``lead`` seconds of this frame to a fresh cube.

    The mover and the reaper charge every cube the whole frame ``dt``; a cube
    born partway through the frame is pulled back by the part of the frame
    that ran before it existed.
    """
    if lead <= 0.0:
        return
    cube = world.get(eid, Cube)
    pos = world.get(eid, Position)
    dx, dy = cube.direction.vector
    step = cube.speed * lead
    pos.x -= dx * step
    pos.y -= dy * step
    world.get(eid, Timer).elapsed = -lead


def make_spawner_system(
    config: GameConfig,
    screen: ScreenQuery,
    bus: SignalBus | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that spawns a cube each time the spawn timer fires.

    A long frame can cross several intervals; each cube is aged by the time
    since its own firing, which the timer's carried remainder gives.
    """

    def on_fire(world: World, ctx: TickContext, eid: EntityId, timer: Timer) -> None:
        if not world.has(eid, Spawner):
            return
        spawner = world.get(eid, Spawner)
        fired = timer.times_finished
        for n in range(fired):
            cube_eid = spawn_cube(world, ctx.random, config, screen)
            age = timer.elapsed + (fired - 1 - n) * timer.duration
            backdate_cube(world, cube_eid, ctx.dt - age)
            spawner.spawned += 1
            cube = world.get(cube_eid, Cube)
            logger.debug("spawned cube %d %s %s speed=%.1f", cube_eid,
                         cube.color.value, cube.direction.name, cube.speed)
            if bus is not None:
                bus.publish("cube_spawned", eid=cube_eid, color=cube.color,
                            direction=cube.direction)
        timer.set_duration(ctx.random.uniform(*config.spawn_interval_range))

    return make_timer_system(on_fire, name=SPAWN_TIMER)
