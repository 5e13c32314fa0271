"""App: the single-threaded frame loop hosting the map pipeline.

Frame cycle:
  1. Assets: complete every load queued during earlier frames
  2. Systems: run, in registration order, each system whose state gate holds
  3. Commands: apply deferred entity spawns/insertions to the world
  4. Transition: make the requested pipeline step current
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeVar

from tankarena.core.enums import Step
from tankarena.core.world_state import WorldState
from tankarena.engine.commands import Commands
from tankarena.engine.state import StateMachine
from tankarena.systems.assets import AssetServer

if TYPE_CHECKING:
    from tankarena.systems.spawn_selection import IndexPicker

logger = logging.getLogger(__name__)

R = TypeVar("R")
System = Callable[["App"], None]


class Plugin(Protocol):
    def build(self, app: App) -> None: ...


class App:
    """World, asset server, pipeline state and the systems that drive them."""

    __slots__ = ("world", "commands", "asset_server", "rng", "state", "_systems", "_resources", "_frame")

    def __init__(self, asset_root: str | Path, rng: IndexPicker) -> None:
        self.world = WorldState()
        self.commands = Commands(self.world)
        self.asset_server = AssetServer(asset_root)
        self.rng = rng
        self.state = StateMachine(Step.LOAD_MAP)
        self._systems: list[tuple[System, Step | None]] = []
        self._resources: dict[type, Any] = {}
        self._frame: int = 0

    @property
    def frame(self) -> int:
        """Number of completed frames."""
        return self._frame

    # -- building --

    def add_plugin(self, plugin: Plugin) -> App:
        plugin.build(self)
        return self

    def add_system(self, system: System, run_if: Step | None = None) -> App:
        self._systems.append((system, run_if))
        return self

    def insert_resource(self, resource: Any) -> App:
        self._resources[type(resource)] = resource
        return self

    def resource(self, resource_type: type[R]) -> R:
        try:
            return self._resources[resource_type]
        except KeyError:
            raise KeyError(f"resource {resource_type.__name__} was never inserted") from None

    # -- running --

    @property
    def settled(self) -> bool:
        """True once the pipeline is FINISHED and no asset load is outstanding."""
        return self.state.is_terminal and self.asset_server.pending_count == 0

    def update(self) -> None:
        """Execute one frame."""
        loaded = self.asset_server.process_pending()
        if loaded:
            logger.debug("Frame %d: %d assets loaded", self._frame, loaded)

        for system, gate in self._systems:
            if gate is None or self.state.in_state(gate):
                system(self)

        self.commands.apply()
        self.state.apply_transition()
        self._frame += 1

    def run(self, max_frames: int) -> bool:
        """Update until settled or *max_frames* frames have run.

        Returns True if the app settled, False if it ran out of frames.
        """
        while not self.settled:
            if self._frame >= max_frames:
                logger.warning(
                    "Gave up after %d frames in %s (%d assets pending)",
                    self._frame, self.state.current.name, self.asset_server.pending_count,
                )
                return False
            self.update()
        logger.info("Match ready after %d frames (%d entities)", self._frame, len(self.world))
        return True
