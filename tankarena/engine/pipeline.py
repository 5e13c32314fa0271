"""MapPipeline: the LOAD_MAP -> GENERATE_MAP -> FINISHED match setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tankarena.core.enums import PollResult, Step
from tankarena.engine.selector import MapSelector

if TYPE_CHECKING:
    from tankarena.engine.app import App
    from tankarena.engine.materializer import MapMaterializer

logger = logging.getLogger(__name__)


class MapPipeline:
    """Owns the current-map slot and the materializer for one match.

    ``load_map`` runs while the app is in LOAD_MAP, ``generate_map`` while
    it is in GENERATE_MAP. Each one requests the next step when its work
    is complete; ``generate_map`` may be polled many times before that.
    """

    __slots__ = ("selector", "materializer", "polls")

    def __init__(self, selector: MapSelector, materializer: MapMaterializer) -> None:
        self.selector = selector
        self.materializer = materializer
        self.polls: int = 0

    def load_map(self, app: App) -> None:
        self.selector.resolve(app.asset_server, app.rng)
        app.state.set_next(Step.GENERATE_MAP)

    def generate_map(self, app: App) -> None:
        self.polls += 1
        result = self.materializer.poll(self.selector.handle, app.commands, app.rng)
        if result == PollResult.DONE:
            app.state.set_next(Step.FINISHED)
