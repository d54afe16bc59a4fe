"""BotSession — the single map + brain shared by the HTTP routes.

Setup swaps the whole (grid, constants, brain) triple under a lock; turns
read the current triple and never mutate it.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Iterable

from kutulu_bot.ai.brain import Brain
from kutulu_bot.ai.classifier import EntityRecord, classify
from kutulu_bot.core.grid import Grid, build_walls, load_row
from kutulu_bot.errors import MapParseError

if TYPE_CHECKING:
    from kutulu_bot.config import BotConfig, GameConstants
    from kutulu_bot.core.models import Command

logger = logging.getLogger(__name__)


class BotSession:
    """Holds the loaded map between HTTP requests."""

    def __init__(self, config: BotConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._brain: Brain | None = None
        self._constants: GameConstants | None = None
        self.turns_played = 0

    @property
    def ready(self) -> bool:
        return self._brain is not None

    @property
    def grid(self) -> Grid | None:
        brain = self._brain
        return brain.grid if brain else None

    @property
    def constants(self) -> GameConstants | None:
        return self._constants

    def setup(self, width: int, height: int, rows: list[str], constants: GameConstants) -> Grid:
        if len(rows) != height:
            raise MapParseError(f"expected {height} map rows, got {len(rows)}")
        grid = build_walls(width, height)
        for index, line in enumerate(rows):
            load_row(grid, index, line)
        with self._lock:
            self._brain = Brain(grid)
            self._constants = constants
            self.turns_played = 0
        logger.info("Session map %dx%d loaded, constants %s", width, height, constants)
        return grid

    def play_turn(self, records: Iterable[EntityRecord]) -> Command:
        brain = self._brain
        if brain is None:
            raise RuntimeError("session has no map; call setup first")
        entities = classify(records)
        if self.config.diagnostics:
            for line in entities.describe():
                logger.info(line)
        command = brain.decide(entities)
        with self._lock:
            self.turns_played += 1
        return command
