"""GET /api/v1/config — expose bot configuration and game constants."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends

from kutulu_bot.api.dependencies import get_session
from kutulu_bot.api.schemas import BotConfigResponse, GameConstantsSchema
from kutulu_bot.api.session import BotSession

router = APIRouter()


@router.get("/config", response_model=BotConfigResponse)
def get_config(session: BotSession = Depends(get_session)) -> BotConfigResponse:
    cfg = session.config
    constants = session.constants
    return BotConfigResponse(
        log_level=cfg.log_level,
        diagnostics=cfg.diagnostics,
        turns_played=session.turns_played,
        constants=GameConstantsSchema(**asdict(constants)) if constants else None,
    )
