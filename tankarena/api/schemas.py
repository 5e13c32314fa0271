"""Pydantic response models for the inspection API."""

from __future__ import annotations

from pydantic import BaseModel


class MapResponse(BaseModel):
    path: str | None
    width: int
    height: int
    walls: list[tuple[int, int]]
    spawn_points: list[tuple[int, int]]


class WallSchema(BaseModel):
    id: int
    x: float
    y: float
    half_extent: float
    textured: bool


class TankSchema(BaseModel):
    id: int
    player: int
    x: float
    y: float
    tagged: bool
    color: tuple[float, float, float, float] | None = None


class CameraSchema(BaseModel):
    x: float
    y: float
    z: float


class StateResponse(BaseModel):
    frame: int
    step: str
    settled: bool
    map_path: str | None
    fingerprint: str
    walls: list[WallSchema]
    tanks: list[TankSchema]
    cameras: list[CameraSchema]


class ConfigResponse(BaseModel):
    world_seed: int
    asset_root: str
    selected_map: str | None
    render_mode: bool
    reject_single_spawn: bool
    max_frames: int


class ControlResponse(BaseModel):
    status: str
    message: str
    step: str
