"""Purpose-separated deterministic hash using xxhash.

The Golden Rule: what a cell spawns depends ONLY on
WorldSeed + its coordinate. Lookup order must not matter.

Formula: Value = TopBits53(Hash(WorldSeed, Purpose, I, J)) / 2**53
"""

from __future__ import annotations

import struct

import xxhash

from worldofbits.core.enums import Purpose


class DeterministicRNG:
    """Stateless purpose-separated pseudo-random number generator.

    Each call is a pure function of (seed, purpose, i, j) with no internal
    mutable state, so results are identical across calls and processes.
    """

    __slots__ = ("_seed",)

    # top 53 bits only, so the float never rounds up to 1.0
    _FLOAT_BITS = 53

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, purpose: Purpose, i: int, j: int) -> int:
        payload = struct.pack("<qiqq", self._seed, purpose.value, i, j)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, purpose: Purpose, i: int, j: int) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return (self._hash(purpose, i, j) >> (64 - self._FLOAT_BITS)) / (1 << self._FLOAT_BITS)

