"""Engine systems: assets, loaders, RNG, spawn selection."""

from tankarena.systems.assets import AssetServer, Assets, Handle
from tankarena.systems.map_loader import MapLoader
from tankarena.systems.rng import DeterministicRNG
from tankarena.systems.spawn_selection import choose_spawns

__all__ = ["AssetServer", "Assets", "DeterministicRNG", "Handle", "MapLoader", "choose_spawns"]
