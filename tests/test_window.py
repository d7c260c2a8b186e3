"""Tests for the grid projection and the viewport window manager."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from worldofbits.config import GameConfig
from worldofbits.core.geo import GeoBounds, GridProjection
from worldofbits.core.models import CellCoord, CellRect
from worldofbits.engine.window import ViewportWindowManager, Window

CFG = GameConfig()
T = CFG.tile_degrees


def _projection() -> GridProjection:
    return GridProjection(CFG.origin_lat, CFG.origin_lng, T)


class TestGridProjection:
    def test_origin_is_cell_zero(self):
        p = _projection()
        assert p.latlng_to_cell(CFG.origin_lat + T / 2, CFG.origin_lng + T / 2) == CellCoord(0, 0)

    def test_south_west_of_origin_is_negative(self):
        p = _projection()
        assert p.latlng_to_cell(CFG.origin_lat - T / 2, CFG.origin_lng - T / 2) == CellCoord(-1, -1)

    def test_north_is_positive_i_east_is_positive_j(self):
        p = _projection()
        assert p.latlng_to_cell(CFG.origin_lat + 3.5 * T, CFG.origin_lng + 0.5 * T) == CellCoord(3, 0)
        assert p.latlng_to_cell(CFG.origin_lat + 0.5 * T, CFG.origin_lng + 5.5 * T) == CellCoord(0, 5)

    def test_cell_bounds_contain_center(self):
        p = _projection()
        c = CellCoord(4, -2)
        b = p.cell_bounds(c)
        lat, lng = p.cell_center(c)
        assert b.south < lat < b.north
        assert b.west < lng < b.east
        assert p.latlng_to_cell(lat, lng) == c

    def test_bounds_to_rect(self):
        p = _projection()
        bounds = GeoBounds(
            south=CFG.origin_lat + 0.5 * T,
            west=CFG.origin_lng + 0.5 * T,
            north=CFG.origin_lat + 2.5 * T,
            east=CFG.origin_lng + 3.5 * T,
        )
        assert p.bounds_to_rect(bounds) == CellRect(0, 0, 2, 3)


class TestCellRect:
    def test_coords_north_row_first(self):
        rect = CellRect(0, 0, 1, 1)
        assert list(rect.coords()) == [CellCoord(1, 0), CellCoord(1, 1), CellCoord(0, 0), CellCoord(0, 1)]

    def test_area_and_contains(self):
        rect = CellRect.around(CellCoord(0, 0), 3)
        assert rect.area == 49
        assert CellCoord(3, -3) in rect
        assert CellCoord(4, 0) not in rect

    def test_spanning_orders_corners(self):
        assert CellRect.spanning(CellCoord(5, -1), CellCoord(2, 3)) == CellRect(2, -1, 5, 3)


class TestViewportWindowManager:
    def test_neighborhood_independent_of_viewport(self):
        wm = ViewportWindowManager(_projection(), 3)
        window = wm.window_for_cells(CellCoord(100, 100), CellCoord(110, 110), CellCoord(0, 0))
        assert window.materialize == CellRect(100, 100, 110, 110)
        assert window.neighborhood == CellRect(-3, -3, 3, 3)

    def test_window_for_bounds(self):
        wm = ViewportWindowManager(_projection(), 2)
        bounds = GeoBounds(
            south=CFG.origin_lat - 0.5 * T,
            west=CFG.origin_lng - 0.5 * T,
            north=CFG.origin_lat + 0.5 * T,
            east=CFG.origin_lng + 0.5 * T,
        )
        window = wm.window_for_bounds(bounds, CellCoord(7, 7))
        assert window.materialize == CellRect(-1, -1, 0, 0)
        assert window.neighborhood == CellRect(5, 5, 9, 9)

    def test_departed_excludes_viewport_and_neighborhood(self):
        window = Window(materialize=CellRect(0, 0, 2, 2), neighborhood=CellRect(10, 10, 12, 12))
        active = {CellCoord(1, 1), CellCoord(11, 11), CellCoord(5, 5), CellCoord(-1, 0)}
        assert ViewportWindowManager.departed(active, window) == [CellCoord(-1, 0), CellCoord(5, 5)]
