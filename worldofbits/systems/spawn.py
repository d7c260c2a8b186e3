"""Spawn source: deterministic initial content of every cell."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from worldofbits.core.enums import Purpose
from worldofbits.core.models import CellCoord, Token

if TYPE_CHECKING:
    from worldofbits.config import GameConfig


class HashSource(Protocol):
    def next_float(self, purpose: Purpose, i: int, j: int) -> float: ...


class SpawnSource:
    """Decides, per coordinate, whether a token spawns and with what value.

    Presence: ``hash(i, j, SPAWN) < spawn_probability``.
    Value:    ``2 ** floor(hash(i, j, VALUE) * value_exponents)``.

    Pure: callable in any order, any number of times.
    """

    __slots__ = ("_rng", "_probability", "_exponents")

    def __init__(self, rng: HashSource, spawn_probability: float = 0.1, value_exponents: int = 4) -> None:
        self._rng = rng
        self._probability = spawn_probability
        self._exponents = value_exponents

    @classmethod
    def from_config(cls, config: GameConfig, rng: HashSource) -> SpawnSource:
        return cls(rng, config.spawn_probability, config.value_exponents)

    def spawn_presence(self, i: int, j: int) -> bool:
        return self._rng.next_float(Purpose.SPAWN, i, j) < self._probability

    def spawn_value(self, i: int, j: int) -> int:
        exponent = int(self._rng.next_float(Purpose.VALUE, i, j) * self._exponents)
        return 1 << exponent

    def initial_token(self, coord: CellCoord) -> Token | None:
        """The token a freshly materialized cell starts with, if any."""
        if not self.spawn_presence(coord.i, coord.j):
            return None
        return Token(self.spawn_value(coord.i, coord.j))
