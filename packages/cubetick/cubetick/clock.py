"""Clock and TickContext for host-driven, variable-delta ticking."""

import random
from typing import Callable

from cubetick.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._step = 1.0 / tps
        self._tick_number = 0
        self._dt = 0.0
        self._elapsed = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def step(self) -> float:
        """Nominal delta used when the host does not supply one."""
        return self._step

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self, dt: float | None = None) -> int:
        if dt is None:
            dt = self._step
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        self._tick_number += 1
        self._dt = dt
        self._elapsed += dt
        return self._tick_number

    def context(self, stop_fn: Callable[[], None], rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
            random=rng,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._dt = 0.0
        self._elapsed = 0.0
