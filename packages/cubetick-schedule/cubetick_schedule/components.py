"""Timer component."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TimerMode(Enum):
    ONCE = "once"
    REPEATING = "repeating"


@dataclass
class Timer:
    """Countdown measured in seconds.

    ``ONCE`` timers clamp at ``duration`` and stay finished until reset.
    ``REPEATING`` timers carry the overflow into the next cycle, and
    ``times_finished`` counts whole cycles completed by the last tick.
    ``just_finished`` is only true for the tick that crossed the boundary.
    """

    name: str
    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = 0.0
    finished: bool = field(default=False, init=False)
    just_finished: bool = field(default=False, init=False)
    times_finished: int = field(default=0, init=False)

    @property
    def repeating(self) -> bool:
        return self.mode is TimerMode.REPEATING

    @property
    def remaining(self) -> float:
        return max(self.duration - self.elapsed, 0.0)

    @property
    def fraction(self) -> float:
        """Elapsed share of the current cycle, in [0, 1]."""
        if self.duration <= 0:
            return 1.0
        return min(self.elapsed / self.duration, 1.0)

    def tick(self, delta: float) -> Timer:
        self.just_finished = False
        self.times_finished = 0

        if self.mode is TimerMode.ONCE:
            if self.finished:
                return self
            self.elapsed += delta
            if self.elapsed >= self.duration:
                self.elapsed = self.duration
                self.finished = True
                self.just_finished = True
                self.times_finished = 1
            return self

        self.elapsed += delta
        if self.duration <= 0:
            self.elapsed = 0.0
            self.finished = True
            self.just_finished = True
            self.times_finished = 1
            return self

        if self.elapsed >= self.duration:
            self.times_finished = int(self.elapsed // self.duration)
            self.elapsed -= self.times_finished * self.duration
            self.finished = True
            self.just_finished = True
        else:
            self.finished = False
        return self

    def set_duration(self, duration: float) -> None:
        """Change the cycle length; ``elapsed`` is left untouched."""
        self.duration = duration

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self.just_finished = False
        self.times_finished = 0
