"""Straight-line cube movement."""
from __future__ import annotations

from typing import TYPE_CHECKING

from purple_cubes.components import Cube, Position

if TYPE_CHECKING:
    from cubetick import TickContext, World


def movement_system(world: World, ctx: TickContext) -> None:
    """Advance every cube along its direction by speed * dt."""
    for eid, (pos, cube) in world.query(Position, Cube):
        dx, dy = cube.direction.vector
        step = cube.speed * ctx.dt
        pos.x += dx * step
        pos.y += dy * step
