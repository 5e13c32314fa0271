"""Components attached to world entities.

A component's Python type is its key in the world: an entity holds at most
one component of each type, and queries select entities by type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from tankarena.core.models import WHITE, Color, Vec3

if TYPE_CHECKING:
    from tankarena.systems.assets import Handle


@dataclass(frozen=True, slots=True)
class Wall:
    """Marker for static, impassable map geometry."""


@dataclass(frozen=True, slots=True)
class Transform:
    translation: Vec3 = field(default_factory=Vec3)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float = 0.0) -> Transform:
        return cls(Vec3(x, y, z))


@dataclass(frozen=True, slots=True)
class Collider:
    """Axis-aligned box collider, described by its half-extents."""

    half_x: float
    half_y: float

    @classmethod
    def cuboid(cls, half_x: float, half_y: float) -> Collider:
        return cls(float(half_x), float(half_y))


@dataclass(frozen=True, slots=True)
class Sprite:
    texture: Handle
    color: Color = WHITE


@dataclass(frozen=True, slots=True)
class InheritedVisibility:
    visible: bool = False


@dataclass(frozen=True, slots=True)
class ViewVisibility:
    visible: bool = False


@dataclass(frozen=True, slots=True)
class Camera2d:
    order: int = 0


@dataclass(frozen=True, slots=True)
class Tank:
    index: int


@dataclass(frozen=True, slots=True)
class Mesh2d:
    mesh: Handle


@dataclass(frozen=True, slots=True)
class MaterialRef:
    material: Handle


class PlayerID:
    """Player-identity marker, parameterized by player index.

    ``PlayerID[0]`` and ``PlayerID[1]`` are distinct classes, so
    ``world.query(PlayerID[0])`` selects one player's entities by type
    alone. Instances carry no data.
    """

    __slots__ = ()

    index: ClassVar[int]
    _variants: ClassVar[dict[int, type[PlayerID]]] = {}

    def __class_getitem__(cls, index: int) -> type[PlayerID]:
        if cls is not PlayerID:
            raise TypeError(f"{cls.__name__} is already parameterized")
        if not isinstance(index, int) or index < 0:
            raise TypeError(f"PlayerID index must be a non-negative int, got {index!r}")
        variant = cls._variants.get(index)
        if variant is None:
            variant = type(f"PlayerID[{index}]", (cls,), {"__slots__": (), "index": index})
            cls._variants[index] = variant
        return variant

    def __new__(cls) -> PlayerID:
        if cls is PlayerID:
            raise TypeError("use PlayerID[index]() to create a player marker")
        return super().__new__(cls)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash((PlayerID, self.index))

    def __repr__(self) -> str:
        return f"PlayerID[{self.index}]"
