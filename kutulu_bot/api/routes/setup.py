"""POST /api/v1/setup — load the map and game constants once per game."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kutulu_bot.api.dependencies import get_session
from kutulu_bot.api.schemas import MapResponse, SetupRequest
from kutulu_bot.api.session import BotSession
from kutulu_bot.config import GameConstants
from kutulu_bot.errors import BotError

router = APIRouter()


@router.post("/setup", response_model=MapResponse)
def setup(body: SetupRequest, session: BotSession = Depends(get_session)) -> MapResponse:
    try:
        grid = session.setup(
            body.width, body.height, body.rows,
            GameConstants(**body.constants.model_dump()),
        )
    except BotError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return MapResponse(width=grid.width, height=grid.height, rows=grid.rows())


@router.get("/map", response_model=MapResponse)
def get_map(session: BotSession = Depends(get_session)) -> MapResponse:
    grid = session.grid
    if grid is None:
        raise HTTPException(status_code=503, detail="No map loaded yet.")
    return MapResponse(width=grid.width, height=grid.height, rows=grid.rows())
