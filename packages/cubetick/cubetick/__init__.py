"""cubetick - A small delta-time tick engine for real-time games."""

from cubetick.clock import Clock
from cubetick.engine import Engine
from cubetick.types import DeadEntityError, EntityId, Predicate, System, TickContext
from cubetick.world import World

__all__ = [
    "Engine",
    "World",
    "Clock",
    "TickContext",
    "EntityId",
    "DeadEntityError",
    "Predicate",
    "System",
]
