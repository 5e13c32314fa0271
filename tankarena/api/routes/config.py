"""GET /api/v1/config: expose the match configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tankarena.api.dependencies import get_match_manager
from tankarena.api.match_manager import MatchManager
from tankarena.api.schemas import ConfigResponse

router = APIRouter()


@router.get("/config", response_model=ConfigResponse)
def get_config(manager: MatchManager = Depends(get_match_manager)) -> ConfigResponse:
    cfg = manager.config
    return ConfigResponse(
        world_seed=cfg.world_seed,
        asset_root=cfg.asset_root,
        selected_map=cfg.selected_map,
        render_mode=cfg.render_mode,
        reject_single_spawn=cfg.reject_single_spawn,
        max_frames=cfg.max_frames,
    )
