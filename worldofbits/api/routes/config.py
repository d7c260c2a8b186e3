"""GET /api/v1/config: expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from worldofbits.api.dependencies import get_engine_manager
from worldofbits.api.engine_manager import EngineManager
from worldofbits.api.schemas import CoordSchema, GameConfigResponse

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(
    manager: EngineManager = Depends(get_engine_manager),
) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        world_seed=cfg.world_seed,
        spawn_probability=cfg.spawn_probability,
        value_exponents=cfg.value_exponents,
        neighborhood_size=cfg.neighborhood_size,
        win_threshold=cfg.win_threshold,
        eviction_policy=cfg.eviction_policy.value,
        origin_lat=cfg.origin_lat,
        origin_lng=cfg.origin_lng,
        tile_degrees=cfg.tile_degrees,
        gameplay_zoom=cfg.gameplay_zoom,
        start=CoordSchema(i=cfg.start_i, j=cfg.start_j),
        max_viewport_cells=cfg.max_viewport_cells,
    )
