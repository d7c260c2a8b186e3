"""POST /api/v1/control/{action}: session lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from worldofbits.api.dependencies import get_engine_manager
from worldofbits.api.engine_manager import EngineManager
from worldofbits.api.schemas import ControlResponse

router = APIRouter()


class ControlAction(str, Enum):
    reset = "reset"


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: EngineManager = Depends(get_engine_manager),
) -> ControlResponse:
    match action:
        case ControlAction.reset:
            was_won = manager.reset()
            message = "Game reset after a win." if was_won else "Game reset."
            return ControlResponse(status="ok", message=message)
