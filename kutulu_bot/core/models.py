"""Core data models: Vector2, the per-turn entity records and Command."""

from __future__ import annotations

from dataclasses import dataclass, field

from kutulu_bot.core.enums import LifecycleState


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def manhattan(self, other: Vector2) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, slots=True)
class ControlledUnit:
    """An explorer under our control."""

    id: int
    pos: Vector2


@dataclass(frozen=True, slots=True)
class ActiveHostile:
    """A wanderer that is out hunting."""

    id: int
    pos: Vector2
    target_id: int
    expiry_countdown: int
    state: LifecycleState = field(default=LifecycleState.ACTIVE)


@dataclass(frozen=True, slots=True)
class SpawningHostile:
    """A wanderer still materialising on its spawn point."""

    id: int
    pos: Vector2
    target_id: int
    spawn_countdown: int
    state: LifecycleState = field(default=LifecycleState.SPAWNING)


# -- diagnostics --

def describe_controlled_unit(unit: ControlledUnit) -> str:
    return f"explorer {unit.id} {unit.pos.x} {unit.pos.y}"


def describe_active_hostile(hostile: ActiveHostile) -> str:
    return (
        f"wanderer {hostile.id} {hostile.pos.x} {hostile.pos.y} "
        f"{int(hostile.state)} {hostile.target_id} {hostile.expiry_countdown}"
    )


def describe_spawning_hostile(hostile: SpawningHostile) -> str:
    return (
        f"spawningMinion {hostile.id} {hostile.pos.x} {hostile.pos.y} "
        f"{int(hostile.state)} {hostile.target_id} {hostile.spawn_countdown}"
    )


@dataclass(frozen=True, slots=True)
class Command:
    """The single command emitted per turn: ``MOVE x y`` or ``WAIT``."""

    target: Vector2 | None = None

    @classmethod
    def move(cls, target: Vector2) -> Command:
        return cls(target=target)

    @classmethod
    def wait(cls) -> Command:
        return cls()

    @property
    def is_wait(self) -> bool:
        return self.target is None

    def __str__(self) -> str:
        if self.target is None:
            return "WAIT"
        return f"MOVE {self.target.x} {self.target.y}"
