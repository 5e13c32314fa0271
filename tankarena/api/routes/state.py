"""GET /api/v1/state: materialized entities and pipeline progress."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tankarena.api.dependencies import get_match_manager
from tankarena.api.match_manager import MatchManager
from tankarena.api.schemas import CameraSchema, StateResponse, TankSchema, WallSchema

router = APIRouter()


@router.get("/state", response_model=StateResponse)
def get_state(manager: MatchManager = Depends(get_match_manager)) -> StateResponse:
    snap = manager.get_snapshot()
    if snap is None:
        raise HTTPException(status_code=503, detail="Match not built yet.")
    return StateResponse(
        frame=snap.frame,
        step=snap.step,
        settled=manager.settled,
        map_path=snap.map_path,
        fingerprint=snap.fingerprint(),
        walls=[
            WallSchema(id=w.entity_id, x=w.position[0], y=w.position[1],
                       half_extent=w.half_extent, textured=w.textured)
            for w in snap.walls
        ],
        tanks=[
            TankSchema(id=t.entity_id, player=t.player, x=t.position[0], y=t.position[1],
                       tagged=t.tagged, color=t.color)
            for t in snap.tanks
        ],
        cameras=[CameraSchema(x=c[0], y=c[1], z=c[2]) for c in snap.cameras],
    )
