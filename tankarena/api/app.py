"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tankarena.api.dependencies import set_match_manager
from tankarena.api.match_manager import MatchManager
from tankarena.api.routes import api_router
from tankarena.config import ArenaConfig
from tankarena.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: ArenaConfig | None = None, configure_logging: bool = True) -> FastAPI:
    """Build and return the inspection API. The match is built at startup."""
    if config is None:
        config = ArenaConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if configure_logging:
            setup_logging(_config.log_level)
        manager = MatchManager(_config)
        manager.build()
        set_match_manager(manager)
        logger.info("Inspection API started.")
        yield
        set_match_manager(None)
        logger.info("Inspection API shutting down.")

    app = FastAPI(
        title="Tank Arena Match Inspector",
        description=(
            "Read-only view of the map selected for the current match and the "
            "wall, camera and tank entities materialized from it."
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Map", "description": "The parsed map descriptor."},
            {"name": "State", "description": "Pipeline step and materialized entities."},
            {"name": "Control", "description": "Rebuild the match, optionally with a new seed."},
            {"name": "Config", "description": "Active match configuration."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
