"""Named guard predicates for FSM transition tables."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cubetick import EntityId, Predicate, World


class FSMGuards:
    """Guard name -> predicate ``(world, eid) -> bool``.

    Transition tables refer to guards by name; ``require`` checks a table
    up front so a typo fails at wiring time instead of on the first tick
    that reaches the state.
    """

    def __init__(self) -> None:
        self._guards: dict[str, Predicate] = {}

    def register(self, name: str, fn: Predicate) -> None:
        """Register a named guard, replacing any previous one."""
        self._guards[name] = fn

    def check(self, name: str, world: World, eid: EntityId) -> bool:
        """Evaluate a guard. Raises KeyError if not registered."""
        return self._guards[name](world, eid)

    def has(self, name: str) -> bool:
        return name in self._guards

    def __contains__(self, name: object) -> bool:
        return name in self._guards

    def names(self) -> list[str]:
        return list(self._guards)

    def require(self, transitions: dict[str, list[list[str]]]) -> None:
        """Raise KeyError naming every guard the table uses but nobody registered."""
        missing = sorted({
            guard for rules in transitions.values() for guard, _ in rules
            if guard not in self._guards
        })
        if missing:
            raise KeyError(f"unregistered guards: {', '.join(missing)}")
