"""Enumerations used throughout the bot."""

from __future__ import annotations

from enum import Enum, IntEnum, unique


@unique
class CellKind(IntEnum):
    """Static map cell kinds."""

    WALL = 0
    SPAWN = 1
    EMPTY = 2


@unique
class LifecycleState(IntEnum):
    """Hostile lifecycle as reported by the game (``param1`` on the wire)."""

    SPAWNING = 0
    ACTIVE = 1


@unique
class EntityType(str, Enum):
    """Entity type tags of the per-turn entity stream."""

    EXPLORER = "EXPLORER"
    WANDERER = "WANDERER"


# Map characters <-> cell kinds
CELL_CHARS: dict[str, CellKind] = {
    "#": CellKind.WALL,
    "w": CellKind.SPAWN,
    ".": CellKind.EMPTY,
}

CELL_SYMBOLS: dict[CellKind, str] = {kind: char for char, kind in CELL_CHARS.items()}
