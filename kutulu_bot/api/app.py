"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from kutulu_bot.api.dependencies import set_session
from kutulu_bot.api.routes import api_router
from kutulu_bot.api.session import BotSession
from kutulu_bot.config import BotConfig
from kutulu_bot.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: BotConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = BotConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        set_session(BotSession(_config))
        logger.info("Bot server started — waiting for setup.")
        yield
        logger.info("Bot server shutting down.")

    app = FastAPI(
        title="Kutulu Evasion Bot",
        description=(
            "HTTP front for the evasion bot.\n\n"
            "## API Groups\n\n"
            "- **Setup** — Load the static map and game constants; read the map back\n"
            "- **Turn** — Submit one turn of entities, receive one command\n"
            "- **Config** — Read-only bot configuration and parsed constants\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Setup", "description": "Static map loading. Called once per game before any turn."},
            {"name": "Turn", "description": "One request per turn; the answer is exactly one MOVE or WAIT command."},
            {"name": "Config", "description": "Read-only bot configuration and the parsed game constants."},
        ],
    )

    app.include_router(api_router)

    return app
