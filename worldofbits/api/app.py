"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from worldofbits.api.dependencies import set_engine_manager
from worldofbits.api.engine_manager import EngineManager
from worldofbits.api.routes import api_router
from worldofbits.config import GameConfig
from worldofbits.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = EngineManager(_config)
        set_engine_manager(manager)
        logger.info("API server started (seed=%d).", _config.world_seed)
        yield
        set_engine_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="World of Bits",
        description=(
            "Map-hosted token crafting game engine.\n\n"
            "## API Groups\n\n"
            "- **Cells** : Materialize grid cells for a viewport or explicit range\n"
            "- **Actions** : Player commands: interact with a cell, move one step\n"
            "- **State** : Player position, held token, win flag and event feed\n"
            "- **Control** : Session lifecycle: reset\n"
            "- **Config** : Read-only game configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Cells", "description": "Cell views for a viewport. Token values are only revealed inside the player's neighborhood."},
            {"name": "Actions", "description": "Collect, place and craft tokens; move the player one cell at a time."},
            {"name": "State", "description": "Session state polled by the map client."},
            {"name": "Control", "description": "Reset the session, the only way out of a won game."},
            {"name": "Config", "description": "Read-only configuration: seed, spawn rate, neighborhood size, win threshold, map anchoring."},
        ],
    )

    # CORS: the map client is served from elsewhere in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
