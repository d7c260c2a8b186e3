"""Engine systems: deterministic hashing and cell spawning."""

from worldofbits.systems.rng import DeterministicRNG
from worldofbits.systems.spawn import SpawnSource

__all__ = ["DeterministicRNG", "SpawnSource"]
