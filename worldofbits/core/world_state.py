"""Mutable sparse world store: the only owner of Cell records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from worldofbits.core.enums import EvictionPolicy
from worldofbits.core.models import Cell, CellCoord, Token

if TYPE_CHECKING:
    from worldofbits.systems.spawn import SpawnSource

logger = logging.getLogger(__name__)


class WorldState:
    """Sparse coordinate -> Cell map over an unbounded grid.

    Cells are created on first request from the spawn source and cached;
    the spawn source is never consulted again for a coordinate while its
    record exists. ``_active`` tracks the coordinates currently inside the
    materialized range; records outside it survive only if the eviction
    policy keeps them.
    """

    __slots__ = ("_spawn", "_policy", "_cells", "_active", "_spawn_calls")

    def __init__(self, spawn: SpawnSource, policy: EvictionPolicy = EvictionPolicy.PERSISTENT) -> None:
        self._spawn = spawn
        self._policy = policy
        self._cells: dict[CellCoord, Cell] = {}
        self._active: set[CellCoord] = set()
        self._spawn_calls: int = 0

    @property
    def policy(self) -> EvictionPolicy:
        return self._policy

    @property
    def spawn_calls(self) -> int:
        """Number of times the spawn source has been consulted."""
        return self._spawn_calls

    # -- access --

    def get(self, coord: CellCoord) -> Cell | None:
        return self._cells.get(coord)

    def get_or_materialize(self, coord: CellCoord) -> Cell:
        cell = self._cells.get(coord)
        if cell is None:
            cell = Cell(coord=coord, token=self._spawn.initial_token(coord))
            self._spawn_calls += 1
            self._cells[coord] = cell
            logger.debug("Materialized %s token=%s", coord, cell.token.value if cell.token else None)
        self._active.add(coord)
        return cell

    def set_token(self, coord: CellCoord, token: Token | None) -> Cell:
        cell = self.get_or_materialize(coord)
        cell.token = token
        cell.modified = True
        return cell

    # -- eviction --

    def evict(self, coord: CellCoord) -> bool:
        """Release *coord* from the active range. Returns True if the record was dropped.

        FARMING drops every record. PERSISTENT keeps records the player
        modified and drops pristine ones; a pristine cell regenerates
        identically from the seed, so dropping it is unobservable.
        """
        self._active.discard(coord)
        cell = self._cells.get(coord)
        if cell is None:
            return False
        if self._policy is EvictionPolicy.PERSISTENT and cell.modified:
            return False
        del self._cells[coord]
        logger.debug("Evicted %s (policy=%s)", coord, self._policy.value)
        return True

    def clear(self) -> None:
        self._cells.clear()
        self._active.clear()

    # -- introspection --

    def active_coords(self) -> set[CellCoord]:
        return set(self._active)

    def is_active(self, coord: CellCoord) -> bool:
        return coord in self._active

    def __contains__(self, coord: object) -> bool:
        return coord in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells.values())
