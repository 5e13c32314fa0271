"""MatchManager: builds a match and keeps its latest snapshot for the API.

Match setup is a handful of frames, so it runs synchronously inside
``build``; readers only ever see a complete, immutable snapshot.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING

from tankarena.core.map_data import Map
from tankarena.engine.pipeline import MapPipeline
from tankarena.engine.plugin import build_app
from tankarena.engine.snapshot import MatchSnapshot

if TYPE_CHECKING:
    from tankarena.config import ArenaConfig
    from tankarena.engine.app import App

logger = logging.getLogger(__name__)


class MatchManager:
    """Owns the current App and a lock-guarded snapshot of it."""

    def __init__(self, config: ArenaConfig) -> None:
        self._config = config
        self._lock = threading.Lock()
        self._app: App | None = None
        self._snapshot: MatchSnapshot | None = None
        self._map: Map | None = None
        self._settled: bool = False

    @property
    def config(self) -> ArenaConfig:
        return self._config

    @property
    def settled(self) -> bool:
        return self._settled

    def get_snapshot(self) -> MatchSnapshot | None:
        with self._lock:
            return self._snapshot

    def get_map(self) -> Map | None:
        with self._lock:
            return self._map

    def build(self) -> MatchSnapshot:
        """Run a fresh match to completion. Map errors propagate."""
        return self._build(self._config)

    def reset(self, seed: int | None = None) -> MatchSnapshot:
        """Rebuild the match. The configuration only changes if the build succeeds."""
        config = self._config if seed is None else replace(self._config, world_seed=seed)
        return self._build(config)

    def _build(self, config: ArenaConfig) -> MatchSnapshot:
        app = build_app(config)
        settled = app.run(config.max_frames)
        snapshot = MatchSnapshot.from_app(app)
        pipeline = app.resource(MapPipeline)
        game_map = app.asset_server.assets(Map).get(pipeline.selector.handle)
        with self._lock:
            self._config = config
            self._app = app
            self._snapshot = snapshot
            self._map = game_map
            self._settled = settled
        logger.info("Match built: %s (seed=%d, step=%s)", snapshot.map_path, config.world_seed, snapshot.step)
        return snapshot
