"""Screen-size queries used by the simulation."""
from __future__ import annotations

from typing import Callable

ScreenSize = tuple[float, float]
ScreenQuery = Callable[[], "ScreenSize | None"]


class MissingSurfaceError(RuntimeError):
    """No drawing surface exists where its dimensions are required.

    This is an environment precondition, not a gameplay condition; the
    entry point treats it as fatal.
    """


def query_size(screen: ScreenQuery) -> ScreenSize:
    size = screen()
    if size is None:
        raise MissingSurfaceError("no drawing surface available to size the playfield")
    width, height = size
    return float(width), float(height)


def fixed_screen(width: float, height: float) -> ScreenQuery:
    """A screen query for headless runs and tests."""
    return lambda: (width, height)
