"""Map descriptor: grid dimensions, wall cells, and tank spawn points."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, NonNegativeInt, PositiveInt

from tankarena.core.errors import EmptySpawnSet, MapInvalidGeometry
from tankarena.core.models import Coord, WALL_SIZE

Cell = tuple[NonNegativeInt, NonNegativeInt]


class Map(BaseModel):
    """Immutable map descriptor, parsed from a JSON map file.

    ``walls`` is an unordered collection kept in file order so that wall
    emission is reproducible. ``spawn_points`` is ordered: its order feeds
    the deterministic spawn tie-break.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, strict=True)

    dim: tuple[PositiveInt, PositiveInt]
    walls: tuple[Cell, ...]
    spawn_points: tuple[Cell, ...]

    # -- geometry --

    @property
    def width(self) -> int:
        return self.dim[0]

    @property
    def height(self) -> int:
        return self.dim[1]

    @property
    def world_size(self) -> tuple[float, float]:
        return (self.width * WALL_SIZE, self.height * WALL_SIZE)

    def in_bounds(self, cell: Coord) -> bool:
        return 0 <= cell[0] < self.width and 0 <= cell[1] < self.height

    def distinct_spawn_count(self) -> int:
        return len(set(self.spawn_points))

    def check_geometry(self, path: str | Path) -> None:
        """Raise if any coordinate is inconsistent with ``dim``.

        Walls and spawn points must lie inside the grid and must not
        overlap; at least one spawn point is required.
        """
        if not self.spawn_points:
            raise EmptySpawnSet(path, "map has no spawn points")
        for cell in self.walls:
            if not self.in_bounds(cell):
                raise MapInvalidGeometry(path, f"wall {cell} lies outside {self.width}x{self.height} map")
        for cell in self.spawn_points:
            if not self.in_bounds(cell):
                raise MapInvalidGeometry(path, f"spawn point {cell} lies outside {self.width}x{self.height} map")
        overlap = set(self.walls) & set(self.spawn_points)
        if overlap:
            raise MapInvalidGeometry(path, f"spawn points {sorted(overlap)} are also walls")

    # -- comparison / serialization --

    def same_layout(self, other: Map) -> bool:
        """Equality that ignores the order of ``walls``."""
        return (
            self.dim == other.dim
            and set(self.walls) == set(other.walls)
            and self.spawn_points == other.spawn_points
        )

    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)

    @classmethod
    def from_json(cls, text: str | bytes) -> Map:
        return cls.model_validate_json(text)
