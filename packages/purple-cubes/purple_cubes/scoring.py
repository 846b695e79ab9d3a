"""Round score."""
from __future__ import annotations

from purple_cubes import constants as C


class Scorer:
    """Running score for the current round.

    The value only moves by the fixed reward or penalty; ``reset`` is the
    one way to set it outright.
    """

    def __init__(self, reward: int = C.HIT_REWARD, penalty: int = C.MISS_PENALTY) -> None:
        self._reward = reward
        self._penalty = penalty
        self._value = 0
        self.hits = 0
        self.wrong = 0
        self.misses = 0

    @property
    def value(self) -> int:
        return self._value

    @property
    def display(self) -> str:
        return f"Score: {self._value}"

    def reward(self) -> int:
        """Correct key on a purple cube."""
        self._value += self._reward
        self.hits += 1
        return self._value

    def penalize(self, missed: bool = False) -> int:
        """Wrong-colour hit, or a purple cube that expired when ``missed``."""
        self._value -= self._penalty
        if missed:
            self.misses += 1
        else:
            self.wrong += 1
        return self._value

    def reset(self) -> None:
        self._value = 0
        self.hits = 0
        self.wrong = 0
        self.misses = 0
