"""Terminal view layer: renders the neighborhood as text and reads commands.

Commands (one per line):
  n / s / e / w        move one cell
  i <di> <dj>          interact with the cell at player + (di, dj)
  r                    reset the game
  q                    quit
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from worldofbits.core.enums import Direction
from worldofbits.core.models import CellCoord

if TYPE_CHECKING:
    from worldofbits.engine.game import GameEngine

logger = logging.getLogger(__name__)

_CELL_WIDTH = 4


@dataclass(frozen=True, slots=True)
class Command:
    verb: str                       # "move" | "interact" | "reset" | "quit"
    direction: Direction | None = None
    offset: CellCoord | None = None


def parse_command(line: str) -> Command | None:
    """Parse one input line. Returns None for anything unrecognized."""
    parts = line.split()
    if not parts:
        return None
    head = parts[0].lower()
    if head in ("q", "quit"):
        return Command("quit")
    if head in ("r", "reset"):
        return Command("reset")
    if head in ("i", "interact"):
        if len(parts) != 3:
            return None
        try:
            return Command("interact", offset=CellCoord(int(parts[1]), int(parts[2])))
        except ValueError:
            return None
    try:
        return Command("move", direction=Direction.parse(head))
    except ValueError:
        return None


def render(engine: GameEngine) -> str:
    """Text picture of the player's neighborhood, north at the top."""
    player = engine.player
    held = engine.held
    lines = [
        f"player {player}  holding {held.value if held else '-'}"
        + ("  *** YOU WON *** (r to reset)" if engine.is_won() else ""),
    ]
    views = engine.neighborhood_views()
    rect = engine.window.neighborhood
    for row in range(rect.height):
        cells = views[row * rect.width:(row + 1) * rect.width]
        text = []
        for view in cells:
            label = str(view.value) if view.has_token else "."
            if view.coord == player:
                label = "@" + label
            text.append(label.rjust(_CELL_WIDTH))
        lines.append("".join(text))
    return "\n".join(lines)


def run_terminal(engine: GameEngine, stdin: TextIO, stdout: TextIO) -> None:
    """Read commands until ``q`` or end of input, redrawing after each one."""
    stdout.write(render(engine) + "\n")
    for line in stdin:
        command = parse_command(line)
        if command is None:
            stdout.write("? commands: n s e w | i <di> <dj> | r | q\n")
            continue
        if command.verb == "quit":
            break
        if command.verb == "reset":
            engine.reset()
        elif command.verb == "move":
            engine.move_player(command.direction)
        elif command.verb == "interact":
            result = engine.interact(engine.player + command.offset)
            stdout.write(f"{result!r}\n")
        stdout.write(render(engine) + "\n")
    stdout.flush()
