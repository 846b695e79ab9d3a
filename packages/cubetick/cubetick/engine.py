"""Engine - system pipeline, delta-time stepping, and lifecycle hooks."""

import os
import random
from typing import Callable

from cubetick.clock import Clock
from cubetick.types import System, TickContext
from cubetick.world import World


class Engine:
    def __init__(self, tps: int = 60, seed: int | None = None) -> None:
        self._clock = Clock(tps)
        self._world = World()
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_hooks: list[Callable[[World, TickContext], None]] = []
        self._stop_requested: bool = False
        self._started: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    @property
    def started(self) -> bool:
        return self._started

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[World, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[World, TickContext], None]) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return self._clock.context(self._request_stop, self._rng)

    def _tick(self, dt: float | None) -> None:
        self._clock.advance(dt)
        ctx = self._context()
        for system in self._systems:
            system(self._world, ctx)
            if self._stop_requested:
                break

    def start(self) -> None:
        """Fire start hooks. Later calls are no-ops until stop()."""
        if self._started:
            return
        self._started = True
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._world, ctx)

    def stop(self) -> None:
        if not self._started:
            return
        self._started = False
        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._world, ctx)

    def step(self, dt: float | None = None) -> None:
        """Run one tick. ``dt`` is the host's frame delta in seconds."""
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int, dt: float | None = None) -> None:
        self.start()
        for _ in range(n):
            self._tick(dt)
            if self._stop_requested:
                break
        self.stop()
