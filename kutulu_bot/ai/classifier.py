"""Entity classifier: turns one turn's flat records into typed collections.

Classification is stateless: every turn is derived fresh from that turn's
records and the relative input order is preserved inside each collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from kutulu_bot.core.enums import EntityType, LifecycleState
from kutulu_bot.core.models import (
    ActiveHostile,
    ControlledUnit,
    SpawningHostile,
    Vector2,
    describe_active_hostile,
    describe_controlled_unit,
    describe_spawning_hostile,
)
from kutulu_bot.errors import (
    MissingControlledUnitError,
    UnknownEntityTypeError,
    UnknownLifecycleStateError,
)


@dataclass(frozen=True, slots=True)
class EntityRecord:
    """One raw ``<TYPE> <id> <x> <y> <p0> <p1> <p2>`` entity line."""

    type_tag: str
    id: int
    x: int
    y: int
    param0: int = 0
    param1: int = 0
    param2: int = 0


@dataclass(slots=True)
class TurnEntities:
    """Classifier output for a single turn."""

    controlled: list[ControlledUnit] = field(default_factory=list)
    hostiles: list[ActiveHostile] = field(default_factory=list)
    spawning: list[SpawningHostile] = field(default_factory=list)

    @property
    def me(self) -> ControlledUnit:
        """The unit the bot acts on: the first one reported."""
        if not self.controlled:
            raise MissingControlledUnitError()
        return self.controlled[0]

    def describe(self) -> list[str]:
        lines = [describe_controlled_unit(u) for u in self.controlled]
        lines.extend(describe_active_hostile(h) for h in self.hostiles)
        lines.extend(describe_spawning_hostile(s) for s in self.spawning)
        return lines


def classify(records: Iterable[EntityRecord]) -> TurnEntities:
    """Dispatch each record by type tag and, for wanderers, lifecycle state."""
    result = TurnEntities()
    for rec in records:
        pos = Vector2(rec.x, rec.y)
        if rec.type_tag == EntityType.EXPLORER:
            result.controlled.append(ControlledUnit(id=rec.id, pos=pos))
        elif rec.type_tag == EntityType.WANDERER:
            try:
                state = LifecycleState(rec.param1)
            except ValueError:
                raise UnknownLifecycleStateError(rec.id, rec.param1) from None
            if state == LifecycleState.SPAWNING:
                result.spawning.append(SpawningHostile(
                    id=rec.id, pos=pos, target_id=rec.param2, spawn_countdown=rec.param0,
                ))
            else:
                result.hostiles.append(ActiveHostile(
                    id=rec.id, pos=pos, target_id=rec.param2, expiry_countdown=rec.param0,
                ))
        else:
            raise UnknownEntityTypeError(rec.type_tag)
    return result
