"""Game configuration."""
from __future__ import annotations

from dataclasses import dataclass

from purple_cubes import constants as C


class ConfigError(ValueError):
    """Raised when a GameConfig holds values the game cannot run with."""


@dataclass(frozen=True)
class GameConfig:
    round_seconds: float = C.ROUND_SECONDS
    first_spawn_interval: float = C.FIRST_SPAWN_INTERVAL
    spawn_interval_range: tuple[float, float] = C.SPAWN_INTERVAL_RANGE
    cube_lifetime: float = C.CUBE_LIFETIME
    purple_chance: float = C.PURPLE_CHANCE
    size_fraction: float = C.SIZE_FRACTION
    speed_range: tuple[float, float] = C.SPEED_RANGE
    hit_reward: int = C.HIT_REWARD
    miss_penalty: int = C.MISS_PENALTY
    skip_menu: bool = False

    def validate(self) -> GameConfig:
        """Return self, or raise ConfigError naming the first bad field."""
        for name in ("round_seconds", "first_spawn_interval", "cube_lifetime",
                     "size_fraction"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("spawn_interval_range", "speed_range"):
            low, high = getattr(self, name)
            if low <= 0 or high < low:
                raise ConfigError(f"{name} must satisfy 0 < low <= high, got {(low, high)}")
        if not 0.0 <= self.purple_chance <= 1.0:
            raise ConfigError(f"purple_chance must be in [0, 1], got {self.purple_chance}")
        if self.hit_reward < 0 or self.miss_penalty < 0:
            raise ConfigError("hit_reward and miss_penalty are magnitudes and must be >= 0")
        return self
