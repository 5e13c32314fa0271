"""POST /api/v1/control/reset: rebuild the match."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from tankarena.api.dependencies import get_match_manager
from tankarena.api.match_manager import MatchManager
from tankarena.api.schemas import ControlResponse
from tankarena.config import SEED_MAX, SEED_MIN
from tankarena.core.errors import ArenaError

router = APIRouter()


@router.post("/control/reset", response_model=ControlResponse)
def reset(
    seed: int | None = Query(
        None, ge=SEED_MIN, le=SEED_MAX,
        description="New world seed; keeps the current one if omitted",
    ),
    manager: MatchManager = Depends(get_match_manager),
) -> ControlResponse:
    try:
        snapshot = manager.reset(seed)
    except ArenaError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    return ControlResponse(
        status="ok",
        message=f"Match rebuilt with seed {manager.config.world_seed}.",
        step=snapshot.step,
    )
