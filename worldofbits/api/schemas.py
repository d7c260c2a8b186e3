"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from worldofbits.core.models import INT32_MAX, INT32_MIN, CellRect, CellView

CoordInt = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


# --- Cells ---

class CoordSchema(BaseModel):
    i: int
    j: int


class CellViewSchema(BaseModel):
    i: int
    j: int
    has_token: bool
    value: int | None = None
    in_neighborhood: bool

    @classmethod
    def from_view(cls, view: CellView) -> CellViewSchema:
        return cls(
            i=view.coord.i,
            j=view.coord.j,
            has_token=view.has_token,
            value=view.value,
            in_neighborhood=view.in_neighborhood,
        )


class RectSchema(BaseModel):
    min_i: int
    min_j: int
    max_i: int
    max_j: int

    @classmethod
    def from_rect(cls, rect: CellRect) -> RectSchema:
        return cls(min_i=rect.min_i, min_j=rect.min_j, max_i=rect.max_i, max_j=rect.max_j)


class CellsResponse(BaseModel):
    materialize: RectSchema
    neighborhood: RectSchema
    cells: list[CellViewSchema]


class CellBoundsResponse(BaseModel):
    i: int
    j: int
    south: float
    west: float
    north: float
    east: float


# --- Viewport ---

class GeoBoundsRequest(BaseModel):
    south: float = Field(ge=-90.0, le=90.0)
    west: float = Field(ge=-180.0, le=180.0)
    north: float = Field(ge=-90.0, le=90.0)
    east: float = Field(ge=-180.0, le=180.0)

    @model_validator(mode="after")
    def _check_order(self) -> GeoBoundsRequest:
        if self.north < self.south:
            raise ValueError("north must not be below south")
        if self.east < self.west:
            raise ValueError("east must not be less than west")
        return self


# --- Actions ---

class InteractRequest(BaseModel):
    i: CoordInt
    j: CoordInt


class InteractionResponse(BaseModel):
    kind: str
    value: int | None = None
    reason: str = ""
    held: int | None = None
    won: bool = False


class MoveResponse(BaseModel):
    player: CoordSchema
    moved: bool
    won: bool = False


# --- State ---

class EventSchema(BaseModel):
    seq: int
    category: str
    message: str
    i: int | None = None
    j: int | None = None


class GameStateResponse(BaseModel):
    player: CoordSchema
    held: int | None = None
    won: bool
    materialized_count: int
    active_count: int
    neighborhood: RectSchema
    events: list[EventSchema] = Field(default_factory=list)


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str


# --- Config ---

class GameConfigResponse(BaseModel):
    world_seed: int
    spawn_probability: float
    value_exponents: int
    neighborhood_size: int
    win_threshold: int
    eviction_policy: str
    origin_lat: float
    origin_lng: float
    tile_degrees: float
    gameplay_zoom: int
    start: CoordSchema
    max_viewport_cells: int
