"""Core data models and map representation."""

from kutulu_bot.core.enums import CellKind, EntityType, LifecycleState
from kutulu_bot.core.models import ActiveHostile, ControlledUnit, SpawningHostile, Vector2
from kutulu_bot.core.grid import Grid

__all__ = [
    "ActiveHostile",
    "CellKind",
    "ControlledUnit",
    "EntityType",
    "Grid",
    "LifecycleState",
    "SpawningHostile",
    "Vector2",
]
