"""GET /api/v1/map: the selected map descriptor."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from tankarena.api.dependencies import get_match_manager
from tankarena.api.match_manager import MatchManager
from tankarena.api.schemas import MapResponse

router = APIRouter()


@router.get("/map", response_model=MapResponse)
def get_map(manager: MatchManager = Depends(get_match_manager)) -> MapResponse:
    game_map = manager.get_map()
    snapshot = manager.get_snapshot()
    if game_map is None or snapshot is None:
        raise HTTPException(status_code=503, detail="Map not loaded yet.")
    return MapResponse(
        path=snapshot.map_path,
        width=game_map.width,
        height=game_map.height,
        walls=list(game_map.walls),
        spawn_points=list(game_map.spawn_points),
    )
