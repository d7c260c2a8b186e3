"""Win condition: flips the session into its terminal state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from worldofbits.core.enums import InteractionKind

if TYPE_CHECKING:
    from worldofbits.core.models import InteractionResult, SessionState

logger = logging.getLogger(__name__)


class WinConditionMonitor:
    """Passive observer of craft results."""

    __slots__ = ("_session", "_threshold")

    def __init__(self, session: SessionState, threshold: int) -> None:
        self._session = session
        self._threshold = threshold

    @property
    def threshold(self) -> int:
        return self._threshold

    def observe(self, result: InteractionResult) -> bool:
        """Return True if *result* just won the game."""
        if self._session.won or result.kind is not InteractionKind.CRAFTED:
            return False
        if result.value is None or result.value < self._threshold:
            return False
        self._session.won = True
        logger.info("Crafted %d >= %d, game won.", result.value, self._threshold)
        return True
