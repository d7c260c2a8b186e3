"""GameEngine: the single authoritative owner of one session's state.

Every public method is one event: it runs to completion, including the
re-derivation of the current window, before returning. Nothing here
blocks or performs I/O. Callers sharing an engine across threads must
serialize all calls behind one lock (see ``EngineManager``).
"""

from __future__ import annotations

import logging

from worldofbits.config import GameConfig
from worldofbits.core.enums import Direction
from worldofbits.core.geo import GeoBounds, GridProjection
from worldofbits.core.models import (
    DIRECTION_OFFSETS,
    CellCoord,
    CellView,
    InteractionResult,
    Inventory,
    SessionState,
    Token,
)
from worldofbits.core.world_state import WorldState
from worldofbits.engine.interaction import InteractionStateMachine
from worldofbits.engine.win_monitor import WinConditionMonitor
from worldofbits.engine.window import ViewportWindowManager, Window
from worldofbits.systems.rng import DeterministicRNG
from worldofbits.systems.spawn import HashSource, SpawnSource
from worldofbits.utils.event_log import EventLog

logger = logging.getLogger(__name__)


class GameEngine:
    """Owns the world store, inventory and session; exposes the game commands."""

    __slots__ = (
        "_config",
        "_projection",
        "_spawn",
        "_world",
        "_inventory",
        "_session",
        "_machine",
        "_monitor",
        "_window_manager",
        "_window",
        "_events",
    )

    def __init__(self, config: GameConfig | None = None, rng: HashSource | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        cfg = self._config

        self._projection = GridProjection(cfg.origin_lat, cfg.origin_lng, cfg.tile_degrees)
        self._spawn = SpawnSource.from_config(cfg, rng if rng is not None else DeterministicRNG(cfg.world_seed))
        self._world = WorldState(self._spawn, cfg.eviction_policy)
        self._inventory = Inventory()
        self._session = SessionState(player=cfg.start)
        self._machine = InteractionStateMachine(self._world, self._inventory, self._session, cfg.neighborhood_size)
        self._monitor = WinConditionMonitor(self._session, cfg.win_threshold)
        self._window_manager = ViewportWindowManager(self._projection, cfg.neighborhood_size)
        self._events = EventLog(cfg.event_log_size)

        # Until a view reports its viewport, materialize just the neighborhood.
        nb = self._window_manager.neighborhood(self._session.player)
        self._window = Window(materialize=nb, neighborhood=nb)
        self._materialize_window()

        logger.info(
            "GameEngine ready (seed=%d, policy=%s, start=%s)",
            cfg.world_seed, cfg.eviction_policy.value, cfg.start,
        )

    # -- read-only state --

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def projection(self) -> GridProjection:
        return self._projection

    @property
    def spawn(self) -> SpawnSource:
        return self._spawn

    @property
    def world(self) -> WorldState:
        return self._world

    @property
    def player(self) -> CellCoord:
        return self._session.player

    @property
    def held(self) -> Token | None:
        return self._inventory.held

    @property
    def window(self) -> Window:
        return self._window

    @property
    def events(self) -> EventLog:
        return self._events

    def is_won(self) -> bool:
        return self._session.won

    # -- views --

    def cell_view(self, coord: CellCoord) -> CellView:
        cell = self._world.get_or_materialize(coord)
        in_neighborhood = self._window.neighborhood.contains(coord)
        value = cell.token.value if cell.token is not None and in_neighborhood else None
        return CellView(coord=coord, has_token=cell.has_token, value=value, in_neighborhood=in_neighborhood)

    def views(self) -> list[CellView]:
        """Views of every cell in the current materialization range."""
        return [self.cell_view(c) for c in self._window.materialize.coords()]

    def neighborhood_views(self) -> list[CellView]:
        """Views of the player's interaction box, whether or not it is on screen."""
        return [self.cell_view(c) for c in self._window.neighborhood.coords()]

    # -- viewport events --

    def materialize_range(self, min_coord: CellCoord, max_coord: CellCoord) -> list[CellView]:
        self._apply_window(self._window_manager.window_for_cells(min_coord, max_coord, self._session.player))
        return self.views()

    def update_viewport(self, bounds: GeoBounds) -> list[CellView]:
        self._apply_window(self._window_manager.window_for_bounds(bounds, self._session.player))
        return self.views()

    # -- player events --

    def interact(self, coord: CellCoord, player: CellCoord | None = None) -> InteractionResult:
        """Collect, place or craft at *coord*. Never raises for gameplay reasons."""
        if player is None:
            player = self._session.player
        result = self._machine.interact(coord, player)
        if result.mutated:
            self._events.append(result.kind.value, f"{result.kind.value} {result.value} at {coord}", (coord.i, coord.j))
        if self._monitor.observe(result):
            self._events.append("won", f"crafted {result.value}, game won", (coord.i, coord.j))
        return result

    def move_player(self, direction: Direction | str) -> CellCoord:
        """Step one cell. No-op once the game is won or at the 32-bit edge."""
        if isinstance(direction, str):
            direction = Direction.parse(direction)
        direction = Direction(direction)
        current = self._session.player
        if self._session.won:
            return current

        target = current + DIRECTION_OFFSETS[direction]
        if not target.in_int32():
            logger.warning("Refusing move %s from %s: outside coordinate range", direction.name, current)
            return current

        self._session.player = target
        self._apply_window(Window(self._window.materialize, self._window_manager.neighborhood(target)))
        self._events.append("moved", f"moved {direction.name.lower()} to {target}", (target.i, target.j))
        return target

    def reset(self) -> None:
        """Start a fresh session: empty world, empty hand, start position, not won."""
        self._world.clear()
        self._inventory.clear()
        self._session.player = self._config.start
        self._session.won = False
        self._apply_window(Window(self._window.materialize, self._window_manager.neighborhood(self._config.start)))
        self._events.append("reset", "game reset", (self._config.start.i, self._config.start.j))
        logger.info("Game reset.")

    # -- internals --

    def _apply_window(self, window: Window) -> None:
        departed = self._window_manager.departed(self._world.active_coords(), window)
        for coord in departed:
            self._world.evict(coord)
        if departed:
            logger.debug("Released %d cells leaving the viewport", len(departed))
        self._window = window
        self._materialize_window()

    def _materialize_window(self) -> None:
        for coord in self._window.materialize.coords():
            self._world.get_or_materialize(coord)
