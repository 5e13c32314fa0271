"""Tank construction. Tank behavior lives elsewhere; these factories only
assemble the components a freshly spawned tank starts with."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tankarena.core.components import Collider, MaterialRef, Mesh2d, Tank, Transform
from tankarena.core.enums import Visibility
from tankarena.core.models import Color
from tankarena.systems.image_loader import Image

if TYPE_CHECKING:
    from tankarena.engine.commands import Commands
    from tankarena.systems.assets import AssetServer, Assets, Handle

TANK_SIZE: float = 24.0
TANK_Z: float = 0.0
TANK_TEXTURE = "textures/tank/body.png"


@dataclass(frozen=True, slots=True)
class Mesh:
    """Axis-aligned rectangle mesh centred on its entity."""

    width: float
    height: float


@dataclass(frozen=True, slots=True)
class TankMaterial:
    color: Color
    texture: Handle | None = None


def create_minimal_tank(x: float, y: float, index: int, commands: Commands) -> int:
    """Spawn a physics-only tank and return its entity id."""
    return commands.spawn(
        Tank(index),
        Transform.from_xyz(x, y, TANK_Z),
        Collider.cuboid(TANK_SIZE / 2, TANK_SIZE / 2),
    )


def create_tank(
    x: float,
    y: float,
    index: int,
    color: Color,
    commands: Commands,
    meshes: Assets[Mesh],
    materials: Assets[TankMaterial],
    asset_server: AssetServer,
) -> int:
    """Spawn a rendered tank tinted with *color* and return its entity id."""
    eid = create_minimal_tank(x, y, index, commands)
    mesh = meshes.add(Mesh(TANK_SIZE, TANK_SIZE))
    material = materials.add(TankMaterial(color, asset_server.load(TANK_TEXTURE, Image)))
    commands.entity(eid).insert(Mesh2d(mesh), MaterialRef(material), Visibility.INHERITED)
    return eid
