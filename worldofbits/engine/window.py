"""Viewport window manager: which cells to materialize, show and release."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from worldofbits.core.models import CellCoord, CellRect

if TYPE_CHECKING:
    from worldofbits.core.geo import GeoBounds, GridProjection


@dataclass(frozen=True, slots=True)
class Window:
    """A materialization range plus the player's interaction box.

    The two rectangles are independent: the neighborhood may lie partly
    or wholly outside the materialized viewport.
    """

    materialize: CellRect
    neighborhood: CellRect


class ViewportWindowManager:
    """Computes windows from viewports and player positions. Never mutates tokens."""

    __slots__ = ("_projection", "_neighborhood_size")

    def __init__(self, projection: GridProjection, neighborhood_size: int) -> None:
        self._projection = projection
        self._neighborhood_size = neighborhood_size

    def neighborhood(self, player: CellCoord) -> CellRect:
        return CellRect.around(player, self._neighborhood_size)

    def window_for_cells(self, min_coord: CellCoord, max_coord: CellCoord, player: CellCoord) -> Window:
        return Window(
            materialize=CellRect.spanning(min_coord, max_coord),
            neighborhood=self.neighborhood(player),
        )

    def window_for_bounds(self, bounds: GeoBounds, player: CellCoord) -> Window:
        return Window(
            materialize=self._projection.bounds_to_rect(bounds),
            neighborhood=self.neighborhood(player),
        )

    @staticmethod
    def departed(active: Iterable[CellCoord], window: Window) -> list[CellCoord]:
        """Active coordinates outside both the materialization range and the neighborhood."""
        return sorted(
            c for c in active
            if not window.materialize.contains(c) and not window.neighborhood.contains(c)
        )
