"""Player commands: interact with a cell, step in a direction."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from worldofbits.api.dependencies import get_engine_manager
from worldofbits.api.engine_manager import EngineManager
from worldofbits.api.schemas import CoordSchema, InteractionResponse, InteractRequest, MoveResponse
from worldofbits.core.enums import Direction
from worldofbits.core.models import CellCoord

router = APIRouter()


class MoveDirection(str, Enum):
    north = "north"
    south = "south"
    east = "east"
    west = "west"


@router.post("/interact", response_model=InteractionResponse)
def interact(
    body: InteractRequest,
    manager: EngineManager = Depends(get_engine_manager),
) -> InteractionResponse:
    target = CellCoord(body.i, body.j)
    result, held, won = manager.execute(lambda e: (e.interact(target), e.held, e.is_won()))
    return InteractionResponse(
        kind=result.kind.value,
        value=result.value,
        reason=result.reason,
        held=held.value if held is not None else None,
        won=won,
    )


@router.post("/move/{direction}", response_model=MoveResponse)
def move(
    direction: MoveDirection,
    manager: EngineManager = Depends(get_engine_manager),
) -> MoveResponse:
    step = Direction.parse(direction.value)
    before, after, won = manager.execute(lambda e: (e.player, e.move_player(step), e.is_won()))
    return MoveResponse(
        player=CoordSchema(i=after.i, j=after.j),
        moved=after != before,
        won=won,
    )
