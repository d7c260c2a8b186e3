"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Accept ``"n"``, ``"North"``, ``"NORTH"`` and so on."""
        key = text.strip().upper()
        for member in cls:
            if member.name == key or member.name[0] == key:
                return member
        raise ValueError(f"unknown direction {text!r}")


@unique
class Purpose(IntEnum):
    """Hash purpose tags keeping spawn rolls independent of each other."""

    SPAWN = 0
    VALUE = 1


@unique
class InteractionKind(str, Enum):
    """Outcome discriminant of a single interaction."""

    COLLECTED = "collected"
    PLACED = "placed"
    CRAFTED = "crafted"
    REJECTED = "rejected"
    NOOP = "noop"


@unique
class EvictionPolicy(str, Enum):
    """What happens to a cell record when it leaves the materialized range."""

    PERSISTENT = "persistent"   # player mutations survive eviction
    FARMING = "farming"         # records are dropped and respawn from the seed
