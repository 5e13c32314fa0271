"""Entity/component store: only mutated when deferred commands are applied."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TypeVar

C = TypeVar("C")


class WorldState:
    """The single source of truth for spawned entities.

    Each entity is an integer id owning at most one component per type.
    """

    __slots__ = ("_entities", "_next_entity_id")

    def __init__(self) -> None:
        self._entities: dict[int, dict[type, Any]] = {}
        self._next_entity_id: int = 1

    def allocate_entity_id(self) -> int:
        eid = self._next_entity_id
        self._next_entity_id += 1
        return eid

    def spawn(self, components: Iterable[Any], entity_id: int | None = None) -> int:
        eid = self.allocate_entity_id() if entity_id is None else entity_id
        bucket = self._entities.setdefault(eid, {})
        for component in components:
            bucket[type(component)] = component
        return eid

    def insert(self, entity_id: int, component: Any) -> None:
        bucket = self._entities.get(entity_id)
        if bucket is None:
            raise KeyError(f"entity {entity_id} does not exist")
        bucket[type(component)] = component

    # -- reads --

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: int) -> bool:
        return entity_id in self._entities

    def get(self, entity_id: int, component_type: type[C]) -> C | None:
        bucket = self._entities.get(entity_id)
        if bucket is None:
            return None
        return bucket.get(component_type)

    def has(self, entity_id: int, component_type: type) -> bool:
        bucket = self._entities.get(entity_id)
        return bucket is not None and component_type in bucket

    def query(self, *component_types: type) -> Iterator[tuple[int, tuple[Any, ...]]]:
        """Yield ``(entity_id, (component, ...))`` for entities having all types.

        Entities are visited in id order.
        """
        for eid in sorted(self._entities):
            bucket = self._entities[eid]
            if all(t in bucket for t in component_types):
                yield eid, tuple(bucket[t] for t in component_types)

    def count(self, *component_types: type) -> int:
        return sum(1 for _ in self.query(*component_types))
