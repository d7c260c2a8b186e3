"""InteractionStateMachine: validates and applies collect / place / craft.

Each call touches exactly one cell and the inventory. Disallowed actions
are reported as ``rejected`` results and never mutate anything.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worldofbits.core.enums import InteractionKind
from worldofbits.core.models import InteractionResult

if TYPE_CHECKING:
    from worldofbits.core.models import CellCoord, Inventory, SessionState
    from worldofbits.core.world_state import WorldState

logger = logging.getLogger(__name__)

REASON_GAME_WON = "game_won"
REASON_OUT_OF_RANGE = "out_of_range"
REASON_MISMATCH = "mismatch"

_NOOP = InteractionResult(InteractionKind.NOOP)


class InteractionStateMachine:
    """Transition table over (cell token, held token)."""

    __slots__ = ("_world", "_inventory", "_session", "_neighborhood_size")

    def __init__(
        self,
        world: WorldState,
        inventory: Inventory,
        session: SessionState,
        neighborhood_size: int,
    ) -> None:
        self._world = world
        self._inventory = inventory
        self._session = session
        self._neighborhood_size = neighborhood_size

    @property
    def neighborhood_size(self) -> int:
        return self._neighborhood_size

    def validate(self, target: CellCoord, player: CellCoord) -> InteractionResult | None:
        """Return a rejection if the action is not allowed at all, else None."""
        if self._session.won:
            return InteractionResult.rejected(REASON_GAME_WON)
        if target.chebyshev(player) > self._neighborhood_size:
            logger.debug("Interaction at %s out of range of player %s", target, player)
            return InteractionResult.rejected(REASON_OUT_OF_RANGE)
        return None

    def interact(self, target: CellCoord, player: CellCoord) -> InteractionResult:
        rejection = self.validate(target, player)
        if rejection is not None:
            return rejection

        cell = self._world.get_or_materialize(target)
        held = self._inventory.held

        if cell.token is None and held is None:
            return _NOOP

        if held is None:
            # collect
            token = cell.token
            self._world.set_token(target, None)
            self._inventory.hold(token)
            logger.info("Collected %d at %s", token.value, target)
            return InteractionResult(InteractionKind.COLLECTED, token.value)

        if cell.token is None:
            # place
            token = self._inventory.take()
            self._world.set_token(target, token)
            logger.info("Placed %d at %s", token.value, target)
            return InteractionResult(InteractionKind.PLACED, token.value)

        if cell.token.value != held.value:
            return InteractionResult.rejected(REASON_MISMATCH)

        # craft
        crafted = cell.token.doubled()
        self._inventory.take()
        self._world.set_token(target, crafted)
        logger.info("Crafted %d at %s", crafted.value, target)
        return InteractionResult(InteractionKind.CRAFTED, crafted.value)
