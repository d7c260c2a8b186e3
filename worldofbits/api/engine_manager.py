"""EngineManager: thread-safe wrapper around one GameEngine.

FastAPI runs sync handlers on a thread pool. Every engine call goes
through a single mutex so interaction, movement, viewport updates and
eviction stay linearizable with respect to each other.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, TypeVar

from worldofbits.engine.game import GameEngine

if TYPE_CHECKING:
    from worldofbits.config import GameConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EngineManager:
    """Owns the session's GameEngine and serializes access to it."""

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._engine = GameEngine(config)

    # -- exclusive access --

    def execute(self, fn: Callable[[GameEngine], T]) -> T:
        """Run *fn* against the engine while holding the lock.

        Queries go through here too, so a reader never observes a
        half-applied command.
        """
        with self._lock:
            return fn(self._engine)

    # -- commands --

    def reset(self) -> bool:
        """Reset the session. Returns whether it had been won."""
        def _reset(engine: GameEngine) -> bool:
            was_won = engine.is_won()
            engine.reset()
            return was_won

        was_won = self.execute(_reset)
        logger.info("EngineManager reset (was_won=%s).", was_won)
        return was_won

    def is_won(self) -> bool:
        return self.execute(lambda e: e.is_won())
