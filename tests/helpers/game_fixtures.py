"""Game fixtures: scripted hash values and small engine builders.

Usage:
    rng = ScriptedRNG()
    rng.place_token(2, 3, value=4)           # cell (2, 3) spawns a 4
    engine = make_engine(rng=rng, neighborhood_size=3)
    assert engine.interact(CellCoord(2, 3)).value == 4
"""

from __future__ import annotations

import math
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from worldofbits.config import GameConfig
from worldofbits.core.enums import EvictionPolicy, Purpose
from worldofbits.core.models import Inventory, SessionState
from worldofbits.core.world_state import WorldState
from worldofbits.engine.game import GameEngine
from worldofbits.engine.interaction import InteractionStateMachine
from worldofbits.systems.spawn import SpawnSource

# Above every sane spawn probability: "no token here".
EMPTY_ROLL = 0.999


class ScriptedRNG:
    """Hash source returning hand-picked floats; everything else is empty."""

    def __init__(self) -> None:
        self.rolls: dict[tuple[Purpose, int, int], float] = {}
        self.calls: int = 0

    def set_roll(self, purpose: Purpose, i: int, j: int, value: float) -> None:
        self.rolls[(purpose, i, j)] = value

    def place_token(self, i: int, j: int, value: int) -> None:
        """Script cell (i, j) to spawn *value* (1, 2, 4 or 8)."""
        exponent = int(math.log2(value))
        self.set_roll(Purpose.SPAWN, i, j, 0.0)
        self.set_roll(Purpose.VALUE, i, j, (exponent + 0.5) / 4)

    def next_float(self, purpose: Purpose, i: int, j: int) -> float:
        self.calls += 1
        return self.rolls.get((purpose, i, j), EMPTY_ROLL)


def make_engine(rng: ScriptedRNG | None = None, **overrides) -> GameEngine:
    config = GameConfig(**overrides)
    return GameEngine(config, rng=rng if rng is not None else ScriptedRNG())


def make_machine(
    neighborhood_size: int = 3,
    rng: ScriptedRNG | None = None,
    policy: EvictionPolicy = EvictionPolicy.PERSISTENT,
) -> tuple[InteractionStateMachine, WorldState, Inventory, SessionState]:
    world = WorldState(SpawnSource(rng if rng is not None else ScriptedRNG()), policy)
    inventory = Inventory()
    session = SessionState()
    machine = InteractionStateMachine(world, inventory, session, neighborhood_size)
    return machine, world, inventory, session
