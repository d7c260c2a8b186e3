"""Engine layer: game engine, interaction rules, viewport windows, win condition."""

from worldofbits.engine.game import GameEngine
from worldofbits.engine.interaction import InteractionStateMachine
from worldofbits.engine.win_monitor import WinConditionMonitor
from worldofbits.engine.window import ViewportWindowManager, Window

__all__ = [
    "GameEngine",
    "InteractionStateMachine",
    "ViewportWindowManager",
    "WinConditionMonitor",
    "Window",
]
