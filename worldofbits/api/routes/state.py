"""GET /api/v1/state: player, hand, win flag and event feed (polled by UI)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from worldofbits.api.dependencies import get_engine_manager
from worldofbits.api.engine_manager import EngineManager
from worldofbits.api.schemas import CoordSchema, EventSchema, GameStateResponse, RectSchema
from worldofbits.engine.game import GameEngine
from worldofbits.utils.event_log import GameEvent

router = APIRouter()


def _serialize_event(event: GameEvent) -> EventSchema:
    i, j = event.coord if event.coord is not None else (None, None)
    return EventSchema(seq=event.seq, category=event.category, message=event.message, i=i, j=j)


@router.get("/state", response_model=GameStateResponse)
def get_state(
    since_seq: int = Query(0, ge=0, description="Only return events with seq >= this value"),
    limit: int = Query(50, ge=1, le=500, description="Maximum number of events returned, oldest first"),
    manager: EngineManager = Depends(get_engine_manager),
) -> GameStateResponse:
    def build(engine: GameEngine) -> GameStateResponse:
        events = engine.events.since(since_seq)[:limit]
        held = engine.held
        return GameStateResponse(
            player=CoordSchema(i=engine.player.i, j=engine.player.j),
            held=held.value if held is not None else None,
            won=engine.is_won(),
            materialized_count=len(engine.world),
            active_count=len(engine.world.active_coords()),
            neighborhood=RectSchema.from_rect(engine.window.neighborhood),
            events=[_serialize_event(e) for e in events],
        )

    return manager.execute(build)
