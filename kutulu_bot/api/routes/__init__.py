"""Versioned API route modules."""

from fastapi import APIRouter

from kutulu_bot.api.routes.config import router as config_router
from kutulu_bot.api.routes.setup import router as setup_router
from kutulu_bot.api.routes.turn import router as turn_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(setup_router, tags=["Setup"])
api_router.include_router(turn_router, tags=["Turn"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
