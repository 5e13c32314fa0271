"""Immutable snapshot of a materialized match, for the API and dumps."""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any

from tankarena.core.components import Camera2d, Collider, MaterialRef, PlayerID, Sprite, Tank, Transform, Wall
from tankarena.core.tank import TankMaterial
from tankarena.engine.pipeline import MapPipeline
from tankarena.engine.selector import Resolved

if TYPE_CHECKING:
    from tankarena.engine.app import App

Position = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class WallView:
    entity_id: int
    position: Position
    half_extent: float
    textured: bool


@dataclass(frozen=True, slots=True)
class TankView:
    entity_id: int
    player: int
    position: Position
    tagged: bool
    color: tuple[float, float, float, float] | None = None


@dataclass(frozen=True, slots=True)
class MatchSnapshot:
    """Read-only view of the world after (or during) match setup."""

    frame: int
    step: str
    map_path: str | None
    walls: tuple[WallView, ...]
    tanks: tuple[TankView, ...]
    cameras: tuple[Position, ...]

    @classmethod
    def from_app(cls, app: App) -> MatchSnapshot:
        world = app.world

        walls = tuple(
            WallView(
                entity_id=eid,
                position=transform.translation.as_tuple(),
                half_extent=collider.half_x,
                textured=world.has(eid, Sprite),
            )
            for eid, (_, transform, collider) in world.query(Wall, Transform, Collider)
        )

        materials = None
        if app.asset_server.has_asset(TankMaterial):
            materials = app.asset_server.assets(TankMaterial)
        tanks: list[TankView] = []
        for eid, (tank, transform) in world.query(Tank, Transform):
            color = None
            ref = world.get(eid, MaterialRef)
            if ref is not None and materials is not None:
                material = materials.get(ref.material)
                if material is not None:
                    color = material.color.as_tuple()
            tanks.append(TankView(
                entity_id=eid,
                player=tank.index,
                position=transform.translation.as_tuple(),
                tagged=world.has(eid, PlayerID[tank.index]),
                color=color,
            ))

        cameras = tuple(t.translation.as_tuple() for _, (_, t) in world.query(Camera2d, Transform))

        map_path = None
        try:
            slot = app.resource(MapPipeline).selector.slot
        except KeyError:
            slot = None
        if isinstance(slot, Resolved):
            map_path = slot.handle.path

        return cls(
            frame=app.frame,
            step=app.state.current.name,
            map_path=map_path,
            walls=walls,
            tanks=tuple(tanks),
            cameras=cameras,
        )

    def tank(self, player: int) -> TankView | None:
        for view in self.tanks:
            if view.player == player:
                return view
        return None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def fingerprint(self) -> str:
        """Hash of the observable entity set; equal worlds hash equal."""
        parts: list[str] = [f"step={self.step}", f"map={self.map_path}"]
        for w in self.walls:
            parts.append(f"w{w.entity_id}@{w.position}|h={w.half_extent}|tex={w.textured}")
        for t in self.tanks:
            parts.append(f"t{t.entity_id}:p{t.player}@{t.position}|tag={t.tagged}|c={t.color}")
        for c in self.cameras:
            parts.append(f"cam@{c}")
        return hashlib.sha256("\n".join(parts).encode()).hexdigest()
