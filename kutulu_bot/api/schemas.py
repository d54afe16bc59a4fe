"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- Setup ---

class GameConstantsSchema(BaseModel):
    sanity_loss_lonely: int
    sanity_loss_group: int
    hostile_spawn_time: int
    hostile_life_time: int


class SetupRequest(BaseModel):
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    rows: list[str] = Field(description="Map lines of '#', 'w' and '.' characters")
    constants: GameConstantsSchema


class MapResponse(BaseModel):
    width: int
    height: int
    rows: list[str]


# --- Turn ---

class EntitySchema(BaseModel):
    type: str = Field(description="EXPLORER or WANDERER")
    id: int
    x: int
    y: int
    param0: int = 0
    param1: int = 0
    param2: int = 0


class TurnRequest(BaseModel):
    entities: list[EntitySchema]


class TurnResponse(BaseModel):
    command: str
    turn: int


# --- Config ---

class BotConfigResponse(BaseModel):
    log_level: str
    diagnostics: bool
    turns_played: int
    constants: GameConstantsSchema | None = None
