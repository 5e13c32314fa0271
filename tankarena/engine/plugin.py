"""MapPlugin: wires map loading and world generation into an App."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tankarena.core.enums import Step
from tankarena.core.tank import Mesh, TankMaterial
from tankarena.engine.app import App
from tankarena.engine.materializer import FullMaterializer, MapMaterializer, MinimalMaterializer
from tankarena.engine.pipeline import MapPipeline
from tankarena.engine.selector import MapSelector
from tankarena.systems.image_loader import ImageLoader
from tankarena.systems.map_loader import MapLoader
from tankarena.systems.rng import DeterministicRNG

if TYPE_CHECKING:
    from tankarena.config import ArenaConfig
    from tankarena.systems.spawn_selection import IndexPicker

logger = logging.getLogger(__name__)


class MapPlugin:
    """Registers the map asset type and the state-gated pipeline systems.

    *render_mode* picks the full (rendered) materializer over the minimal
    headless one; *selected_map* names a file under ``maps/`` instead of
    drawing one at random.
    """

    __slots__ = ("render_mode", "selected_map", "reject_single_spawn")

    def __init__(
        self,
        render_mode: bool = False,
        selected_map: str | None = None,
        reject_single_spawn: bool = False,
    ) -> None:
        self.render_mode = render_mode
        self.selected_map = selected_map
        self.reject_single_spawn = reject_single_spawn

    def build(self, app: App) -> None:
        app.asset_server.register_loader(MapLoader(self.reject_single_spawn))

        materializer: MapMaterializer
        if self.render_mode:
            app.asset_server.register_loader(ImageLoader())
            app.asset_server.init_asset(Mesh)
            app.asset_server.init_asset(TankMaterial)
            materializer = FullMaterializer(app.asset_server)
        else:
            materializer = MinimalMaterializer(app.asset_server)

        pipeline = MapPipeline(MapSelector(self.selected_map), materializer)
        app.insert_resource(pipeline)
        app.add_system(pipeline.load_map, run_if=Step.LOAD_MAP)
        app.add_system(pipeline.generate_map, run_if=Step.GENERATE_MAP)
        logger.debug(
            "MapPlugin built (render_mode=%s, selected_map=%r)", self.render_mode, self.selected_map,
        )


def build_app(config: ArenaConfig, rng: IndexPicker | None = None) -> App:
    """Construct an App with the MapPlugin configured from *config*."""
    if rng is None:
        rng = DeterministicRNG(config.world_seed)
    app = App(config.asset_root, rng)
    app.add_plugin(MapPlugin(
        render_mode=config.render_mode,
        selected_map=config.selected_map,
        reject_single_spawn=config.reject_single_spawn,
    ))
    return app
