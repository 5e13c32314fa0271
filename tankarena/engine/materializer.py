"""World materializers: turn a loaded ``Map`` into wall, camera and tank entities.

Two variants share one skeleton:

* ``MinimalMaterializer``: headless. Walls get tiny WALL_SIZE/8
  colliders, nothing visual, no camera.
* ``FullMaterializer``: rendered. Walls get full-cell WALL_SIZE/2
  colliders, a sprite and visibility components; a camera is centred on
  the map and tanks are colored per player.

Both are polled once per frame while the pipeline is in GENERATE_MAP and
do nothing until the map asset has loaded.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tankarena.core.components import (
    Camera2d,
    Collider,
    InheritedVisibility,
    PlayerID,
    Sprite,
    Transform,
    ViewVisibility,
    Wall,
)
from tankarena.core.enums import PollResult, Visibility
from tankarena.core.map_data import Map
from tankarena.core.models import BLUE, RED, WALL_SIZE, Color, Coord, cell_to_world
from tankarena.core.tank import Mesh, TankMaterial, create_minimal_tank, create_tank
from tankarena.systems.image_loader import Image
from tankarena.systems.spawn_selection import choose_spawns

if TYPE_CHECKING:
    from tankarena.engine.commands import Commands
    from tankarena.systems.assets import AssetServer, Handle
    from tankarena.systems.spawn_selection import IndexPicker

logger = logging.getLogger(__name__)

WALL_TEXTURE = "textures/map/wall.png"
CAMERA_Z: float = 1.0
PLAYER_COLORS: tuple[Color, Color] = (RED, BLUE)


class MapMaterializer:
    """Shared skeleton: walls, extras, spawn selection, tanks."""

    wall_half_extent: float = WALL_SIZE / 2

    __slots__ = ("_asset_server",)

    def __init__(self, asset_server: AssetServer) -> None:
        self._asset_server = asset_server

    def poll(self, map_handle: Handle, commands: Commands, rng: IndexPicker) -> PollResult:
        game_map = self._asset_server.assets(Map).get(map_handle)
        if game_map is None:
            logger.debug("Map %r not loaded yet", map_handle)
            return PollResult.PENDING

        commands.spawn_batch(self.wall_bundle(cell) for cell in game_map.walls)
        self.spawn_extras(game_map, commands)

        spawns = choose_spawns(game_map.spawn_points, rng)
        for index, cell in enumerate(spawns):
            pos = cell_to_world(cell)
            eid = self.spawn_tank(pos.x, pos.y, index, commands)
            commands.entity(eid).insert(PlayerID[index]())
            logger.info("Player %d spawns at cell %s", index, cell)

        logger.info("Materialized %d walls from %r", len(game_map.walls), map_handle)
        return PollResult.DONE

    def wall_bundle(self, cell: Coord) -> tuple[Any, ...]:
        h = self.wall_half_extent
        return (Wall(), Transform(cell_to_world(cell)), Collider.cuboid(h, h))

    def spawn_extras(self, game_map: Map, commands: Commands) -> None:
        pass

    def spawn_tank(self, x: float, y: float, index: int, commands: Commands) -> int:
        raise NotImplementedError


class MinimalMaterializer(MapMaterializer):
    # Headless runs register small sensor-like wall colliders.
    wall_half_extent = WALL_SIZE / 8

    __slots__ = ()

    def spawn_tank(self, x: float, y: float, index: int, commands: Commands) -> int:
        return create_minimal_tank(x, y, index, commands)


class FullMaterializer(MapMaterializer):
    wall_half_extent = WALL_SIZE / 2

    __slots__ = ("_wall_texture",)

    def __init__(self, asset_server: AssetServer) -> None:
        super().__init__(asset_server)
        self._wall_texture: Handle | None = None

    def wall_bundle(self, cell: Coord) -> tuple[Any, ...]:
        if self._wall_texture is None:
            self._wall_texture = self._asset_server.load(WALL_TEXTURE, Image)
        return super().wall_bundle(cell) + (
            Sprite(self._wall_texture),
            Visibility.INHERITED,
            InheritedVisibility(),
            ViewVisibility(),
        )

    def spawn_extras(self, game_map: Map, commands: Commands) -> None:
        commands.spawn(
            Camera2d(),
            Transform.from_xyz(
                game_map.width / 2 * WALL_SIZE,
                game_map.height / 2 * WALL_SIZE,
                CAMERA_Z,
            ),
        )

    def spawn_tank(self, x: float, y: float, index: int, commands: Commands) -> int:
        return create_tank(
            x, y, index, PLAYER_COLORS[index], commands,
            self._asset_server.assets(Mesh),
            self._asset_server.assets(TankMaterial),
            self._asset_server,
        )
