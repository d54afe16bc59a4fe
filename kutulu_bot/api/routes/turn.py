"""POST /api/v1/turn — classify one turn of entities and answer one command."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from kutulu_bot.ai.classifier import EntityRecord
from kutulu_bot.api.dependencies import get_session
from kutulu_bot.api.schemas import TurnRequest, TurnResponse
from kutulu_bot.api.session import BotSession
from kutulu_bot.errors import BotError

router = APIRouter()


@router.post("/turn", response_model=TurnResponse)
def play_turn(body: TurnRequest, session: BotSession = Depends(get_session)) -> TurnResponse:
    if not session.ready:
        raise HTTPException(status_code=503, detail="No map loaded yet.")
    records = [
        EntityRecord(e.type, e.id, e.x, e.y, e.param0, e.param1, e.param2)
        for e in body.entities
    ]
    try:
        command = session.play_turn(records)
    except BotError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return TurnResponse(command=str(command), turn=session.turns_played)
