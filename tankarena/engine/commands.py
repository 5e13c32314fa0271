"""Deferred entity creation, applied to the world at the end of a frame."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from tankarena.core.world_state import WorldState

logger = logging.getLogger(__name__)


class EntityCommands:
    """Queues component insertions for one (possibly not yet spawned) entity."""

    __slots__ = ("_commands", "id")

    def __init__(self, commands: Commands, entity_id: int) -> None:
        self._commands = commands
        self.id = entity_id

    def insert(self, *components: Any) -> EntityCommands:
        for component in components:
            self._commands._queue.append(("insert", self.id, component))
        return self


class Commands:
    """Command buffer. Entity ids are reserved immediately; the world only
    changes when ``apply`` runs, so a system sees a consistent world."""

    __slots__ = ("_world", "_queue")

    def __init__(self, world: WorldState) -> None:
        self._world = world
        self._queue: list[tuple[str, int, Any]] = []

    def spawn(self, *components: Any) -> int:
        eid = self._world.allocate_entity_id()
        self._queue.append(("spawn", eid, components))
        return eid

    def spawn_batch(self, bundles: Iterable[tuple[Any, ...]]) -> list[int]:
        return [self.spawn(*bundle) for bundle in bundles]

    def entity(self, entity_id: int) -> EntityCommands:
        return EntityCommands(self, entity_id)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def apply(self) -> int:
        """Flush queued commands into the world. Returns the number applied."""
        queue, self._queue = self._queue, []
        for op, eid, payload in queue:
            match op:
                case "spawn":
                    self._world.spawn(payload, entity_id=eid)
                case "insert":
                    self._world.insert(eid, payload)
        if queue:
            logger.debug("Applied %d commands", len(queue))
        return len(queue)
