"""Cell materialization endpoints: explicit ranges and map viewports."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from worldofbits.api.dependencies import get_engine_manager
from worldofbits.api.engine_manager import EngineManager
from worldofbits.api.schemas import (
    CellBoundsResponse,
    CellsResponse,
    CellViewSchema,
    GeoBoundsRequest,
    RectSchema,
)
from worldofbits.core.geo import GeoBounds
from worldofbits.core.models import INT32_MAX, INT32_MIN, CellCoord, CellRect, CellView
from worldofbits.engine.window import Window

router = APIRouter()


def _check_size(rect: CellRect, manager: EngineManager) -> None:
    limit = manager.config.max_viewport_cells
    if rect.area > limit:
        raise HTTPException(
            status_code=413,
            detail=f"Requested {rect.area} cells; at most {limit} may be materialized at once.",
        )


def _cells_response(window: Window, views: list[CellView]) -> CellsResponse:
    return CellsResponse(
        materialize=RectSchema.from_rect(window.materialize),
        neighborhood=RectSchema.from_rect(window.neighborhood),
        cells=[CellViewSchema.from_view(v) for v in views],
    )


@router.get("/cells", response_model=CellsResponse)
def get_cells(
    min_i: int = Query(..., ge=INT32_MIN, le=INT32_MAX),
    min_j: int = Query(..., ge=INT32_MIN, le=INT32_MAX),
    max_i: int = Query(..., ge=INT32_MIN, le=INT32_MAX),
    max_j: int = Query(..., ge=INT32_MIN, le=INT32_MAX),
    manager: EngineManager = Depends(get_engine_manager),
) -> CellsResponse:
    lo, hi = CellCoord(min_i, min_j), CellCoord(max_i, max_j)
    _check_size(CellRect.spanning(lo, hi), manager)
    views, window = manager.execute(lambda e: (e.materialize_range(lo, hi), e.window))
    return _cells_response(window, views)


@router.post("/viewport", response_model=CellsResponse)
def post_viewport(
    body: GeoBoundsRequest,
    manager: EngineManager = Depends(get_engine_manager),
) -> CellsResponse:
    bounds = GeoBounds(south=body.south, west=body.west, north=body.north, east=body.east)
    _check_size(manager.execute(lambda e: e.projection.bounds_to_rect(bounds)), manager)
    views, window = manager.execute(lambda e: (e.update_viewport(bounds), e.window))
    return _cells_response(window, views)


@router.get("/cells/{i}/{j}/bounds", response_model=CellBoundsResponse)
def get_cell_bounds(
    i: int,
    j: int,
    manager: EngineManager = Depends(get_engine_manager),
) -> CellBoundsResponse:
    b = manager.execute(lambda e: e.projection.cell_bounds(CellCoord(i, j)))
    return CellBoundsResponse(i=i, j=j, south=b.south, west=b.west, north=b.north, east=b.east)
