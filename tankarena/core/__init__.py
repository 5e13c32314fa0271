"""Core data models and world representation."""

from tankarena.core.components import Collider, PlayerID, Tank, Transform, Wall
from tankarena.core.enums import Domain, LoadState, PollResult, Step, Visibility
from tankarena.core.map_data import Map
from tankarena.core.models import WALL_SIZE, Color, Coord, Vec3
from tankarena.core.world_state import WorldState

__all__ = [
    "Collider",
    "Color",
    "Coord",
    "Domain",
    "LoadState",
    "Map",
    "PlayerID",
    "PollResult",
    "Step",
    "Tank",
    "Transform",
    "Vec3",
    "Visibility",
    "WALL_SIZE",
    "Wall",
    "WorldState",
]
