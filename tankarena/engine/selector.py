"""Current-map slot and its one-shot resolution into an asset handle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from tankarena.core.enums import Domain
from tankarena.core.errors import AssetsDirectoryUnreadable, InternalStateViolation, MapNotFound
from tankarena.core.map_data import Map

if TYPE_CHECKING:
    from tankarena.systems.assets import AssetServer, Handle
    from tankarena.systems.spawn_selection import IndexPicker

logger = logging.getLogger(__name__)

MAPS_DIR = "maps"


@dataclass(frozen=True, slots=True)
class Unselected:
    """No map named: one is drawn at random from the maps directory."""


@dataclass(frozen=True, slots=True)
class AssetPath:
    """A caller-named map file, relative to the maps directory."""

    name: str


@dataclass(frozen=True, slots=True)
class Resolved:
    handle: Handle


CurrentMap = Union[Unselected, AssetPath, Resolved]


def list_map_files(asset_server: AssetServer) -> list[str]:
    """Return the sorted names of regular, non-hidden files in the maps directory."""
    maps_dir = asset_server.resolve_path(MAPS_DIR)
    try:
        entries = list(maps_dir.iterdir())
    except OSError as exc:
        raise AssetsDirectoryUnreadable(maps_dir, f"unable to read maps directory: {exc.strerror}") from exc
    names = sorted(e.name for e in entries if e.is_file() and not e.name.startswith("."))
    if not names:
        raise AssetsDirectoryUnreadable(maps_dir, "maps directory contains no map files")
    return names


class MapSelector:
    """Owns the current-map slot.

    The slot starts as ``Unselected`` or ``AssetPath`` and is replaced by
    ``Resolved`` exactly once, in ``resolve``.
    """

    __slots__ = ("_slot",)

    def __init__(self, selected_map: str | None = None) -> None:
        self._slot: CurrentMap = Unselected() if selected_map is None else AssetPath(selected_map)

    @property
    def slot(self) -> CurrentMap:
        return self._slot

    @property
    def handle(self) -> Handle:
        """The resolved map handle; only valid after ``resolve``."""
        match self._slot:
            case Resolved(handle=handle):
                return handle
            case _:
                raise InternalStateViolation(f"current map is not resolved yet ({self._slot!r})")

    def resolve(self, asset_server: AssetServer, rng: IndexPicker) -> Handle:
        match self._slot:
            case Unselected():
                names = list_map_files(asset_server)
                name = names[rng.pick_index(Domain.MAP_SELECT, len(names))]
                logger.info("Randomly selected map %r out of %d", name, len(names))
            case AssetPath(name=name):
                if not asset_server.exists(f"{MAPS_DIR}/{name}"):
                    raise MapNotFound(asset_server.resolve_path(f"{MAPS_DIR}/{name}"), "map does not exist")
                logger.info("Using requested map %r", name)
            case Resolved():
                raise InternalStateViolation("current map was already resolved")

        handle = asset_server.load(f"{MAPS_DIR}/{name}", Map)
        self._slot = Resolved(handle)
        return handle
