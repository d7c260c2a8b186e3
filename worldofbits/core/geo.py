"""Conversion between geographic positions and grid cells."""

from __future__ import annotations

import math
from dataclasses import dataclass

from worldofbits.core.models import CellCoord, CellRect


@dataclass(frozen=True, slots=True)
class GeoBounds:
    """Axis-aligned lat/lng rectangle in degrees."""

    south: float
    west: float
    north: float
    east: float


class GridProjection:
    """Maps lat/lng onto integer cells anchored at a fixed origin.

    Cell ``(i, j)`` covers latitudes ``[origin_lat + i*tile, origin_lat + (i+1)*tile)``
    and the matching longitude band for ``j``.
    """

    __slots__ = ("origin_lat", "origin_lng", "tile_degrees")

    def __init__(self, origin_lat: float, origin_lng: float, tile_degrees: float) -> None:
        self.origin_lat = origin_lat
        self.origin_lng = origin_lng
        self.tile_degrees = tile_degrees

    def latlng_to_cell(self, lat: float, lng: float) -> CellCoord:
        i = math.floor((lat - self.origin_lat) / self.tile_degrees)
        j = math.floor((lng - self.origin_lng) / self.tile_degrees)
        return CellCoord(i, j)

    def cell_bounds(self, coord: CellCoord) -> GeoBounds:
        t = self.tile_degrees
        return GeoBounds(
            south=self.origin_lat + coord.i * t,
            west=self.origin_lng + coord.j * t,
            north=self.origin_lat + (coord.i + 1) * t,
            east=self.origin_lng + (coord.j + 1) * t,
        )

    def cell_center(self, coord: CellCoord) -> tuple[float, float]:
        t = self.tile_degrees
        return (
            self.origin_lat + (coord.i + 0.5) * t,
            self.origin_lng + (coord.j + 0.5) * t,
        )

    def bounds_to_rect(self, bounds: GeoBounds) -> CellRect:
        """Cell-aligned bounding box covering every cell the bounds touch."""
        nw = self.latlng_to_cell(bounds.north, bounds.west)
        se = self.latlng_to_cell(bounds.south, bounds.east)
        return CellRect.spanning(nw, se)
