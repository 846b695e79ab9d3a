"""World - entity and component storage with queries."""

from __future__ import annotations

from typing import Any, Generator, TypeVar, cast

from cubetick.types import DeadEntityError, EntityId

T = TypeVar("T")


class World:
    """Table of entities keyed by never-reused integer ids.

    Each component type has its own ``{entity_id: component}`` store, so
    despawning is one dict pop per store.
    """

    def __init__(self) -> None:
        self._components: dict[type, dict[int, Any]] = {}
        self._next_id: int = 0
        self._alive: set[int] = set()

    def spawn(self) -> EntityId:
        eid = self._next_id
        self._next_id += 1
        self._alive.add(eid)
        return eid

    def despawn(self, entity_id: EntityId) -> None:
        self._alive.discard(entity_id)
        for store in self._components.values():
            store.pop(entity_id, None)

    def despawn_all(self, component_type: type) -> int:
        """Despawn every entity carrying ``component_type``. Returns the count."""
        store = self._components.get(component_type)
        if not store:
            return 0
        doomed = list(store)
        for eid in doomed:
            self.despawn(eid)
        return len(doomed)

    def attach(self, entity_id: EntityId, component: Any) -> None:
        ctype = type(component)
        if entity_id not in self._alive:
            raise DeadEntityError(entity_id, f"attach {ctype.__name__}")
        self._components.setdefault(ctype, {})[entity_id] = component

    def detach(self, entity_id: EntityId, component_type: type) -> None:
        store = self._components.get(component_type)
        if store is not None:
            store.pop(entity_id, None)

    def get(self, entity_id: EntityId, component_type: type[T]) -> T:
        if entity_id not in self._alive:
            raise DeadEntityError(entity_id, f"get {component_type.__name__}")
        store = self._components.get(component_type)
        if store is None or entity_id not in store:
            raise KeyError(
                f"Entity {entity_id} has no {component_type.__name__} component"
            )
        return cast(T, store[entity_id])

    def has(self, entity_id: EntityId, component_type: type) -> bool:
        if entity_id not in self._alive:
            return False
        store = self._components.get(component_type)
        return store is not None and entity_id in store

    def query(
        self, *component_types: type
    ) -> Generator[tuple[EntityId, tuple[Any, ...]], None, None]:
        if not component_types:
            return

        base_store = self._components.get(component_types[0])
        if base_store is None:
            return

        # Snapshot the ids so systems may despawn while iterating.
        for eid in list(base_store):
            if eid not in self._alive:
                continue
            components: list[Any] = []
            for ctype in component_types:
                store = self._components.get(ctype)
                if store is None or eid not in store:
                    break
                components.append(store[eid])
            else:
                yield eid, tuple(components)

    def count(self, component_type: type) -> int:
        store = self._components.get(component_type)
        return len(store) if store else 0

    def entities(self) -> frozenset[EntityId]:
        return frozenset(self._alive)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._alive
