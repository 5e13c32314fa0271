"""Loader turning JSON map files into ``Map`` descriptors."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from tankarena.core.errors import InsufficientSpawnPoints, MapNotFound, MapParseError
from tankarena.core.map_data import Map

logger = logging.getLogger(__name__)


class MapLoader:
    """Reads, parses and validates one map file.

    A map with a single distinct spawn point is accepted with a warning
    (both tanks then share that cell) unless *reject_single_spawn* is set.
    """

    asset_type = Map

    __slots__ = ("_reject_single_spawn",)

    def __init__(self, reject_single_spawn: bool = False) -> None:
        self._reject_single_spawn = reject_single_spawn

    def load(self, path: Path) -> Map:
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            raise MapNotFound(path, "map file does not exist") from None
        except IsADirectoryError:
            raise MapNotFound(path, "map path is a directory") from None
        except OSError as exc:
            raise MapParseError(path, f"cannot read map file: {exc.strerror}") from exc

        try:
            game_map = Map.from_json(raw)
        except ValidationError as exc:
            first = exc.errors()[0]
            where = ".".join(str(part) for part in first["loc"]) or "<document>"
            raise MapParseError(path, f"malformed map at {where}: {first['msg']}") from exc

        game_map.check_geometry(path)

        if game_map.distinct_spawn_count() < 2:
            if self._reject_single_spawn:
                raise InsufficientSpawnPoints(path, "map needs at least two distinct spawn points")
            logger.warning("Map %s has a single spawn point; both tanks will share it", path)

        logger.info(
            "Loaded map %s (%dx%d, %d walls, %d spawn points)",
            path.name, game_map.width, game_map.height,
            len(game_map.walls), len(game_map.spawn_points),
        )
        return game_map
