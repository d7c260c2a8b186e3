"""Core data models and world representation."""

from worldofbits.core.enums import Direction, EvictionPolicy, InteractionKind, Purpose
from worldofbits.core.geo import GeoBounds, GridProjection
from worldofbits.core.models import (
    Cell,
    CellCoord,
    CellRect,
    CellView,
    InteractionResult,
    Inventory,
    SessionState,
    Token,
)
from worldofbits.core.world_state import WorldState

__all__ = [
    "Cell",
    "CellCoord",
    "CellRect",
    "CellView",
    "Direction",
    "EvictionPolicy",
    "GeoBounds",
    "GridProjection",
    "InteractionKind",
    "InteractionResult",
    "Inventory",
    "Purpose",
    "SessionState",
    "Token",
    "WorldState",
]
