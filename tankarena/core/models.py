"""Core value types: Vec3, Color, cell coordinates."""

from __future__ import annotations

from dataclasses import dataclass

# Integer (x, y) cell on the map grid.
Coord = tuple[int, int]

# World units per map cell.
WALL_SIZE: float = 32.0


@dataclass(frozen=True, slots=True)
class Vec3:
    """Immutable world-space position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __repr__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g})"


@dataclass(frozen=True, slots=True)
class Color:
    """Linear RGBA color, components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)


WHITE = Color(1.0, 1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)
BLUE = Color(0.0, 0.0, 1.0, 1.0)


def cell_to_world(cell: Coord, z: float = 0.0) -> Vec3:
    """Convert a grid cell to its world-space position."""
    return Vec3(cell[0] * WALL_SIZE, cell[1] * WALL_SIZE, z)


def squared_distance(a: Coord, b: Coord) -> int:
    """Squared Euclidean distance between two cells, in cell units."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy
