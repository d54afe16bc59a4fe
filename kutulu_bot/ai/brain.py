"""Brain — per-turn decision policy.

Active hostiles present: move to the evasion target. Otherwise wait.
Spawning hostiles never influence the decision.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kutulu_bot.ai.spatial import away_from_nearest_hostile
from kutulu_bot.core.models import Command

if TYPE_CHECKING:
    from kutulu_bot.ai.classifier import TurnEntities
    from kutulu_bot.core.grid import Grid


class Brain:
    """Stateless decision engine bound to one static map."""

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    @property
    def grid(self) -> Grid:
        return self._grid

    def decide(self, turn: TurnEntities) -> Command:
        me = turn.me
        if not turn.hostiles:
            return Command.wait()
        target = away_from_nearest_hostile(self._grid, me, turn.hostiles)
        return Command.move(target)
