"""TurnDriver, the setup-then-loop state machine facing the referee.

Exactly one command is written per turn. Any BotError raised while a turn is
being processed propagates out before that turn's command is written.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TextIO

from kutulu_bot.ai.brain import Brain
from kutulu_bot.ai.classifier import classify
from kutulu_bot.config import BotConfig, GameConstants
from kutulu_bot.core.grid import Grid
from kutulu_bot.core.models import Command, describe_controlled_unit
from kutulu_bot.engine.protocol import LineReader, read_setup, read_turn, write_command

logger = logging.getLogger(__name__)


class DriverState(str, Enum):
    AWAITING_SETUP = "awaiting_setup"
    TURN_LOOP = "turn_loop"


class TurnDriver:
    """Reads the referee stream and answers every turn with one command."""

    def __init__(self, stdin: TextIO, stdout: TextIO, config: BotConfig | None = None) -> None:
        self._reader = LineReader(stdin)
        self._out = stdout
        self._config = config or BotConfig()
        self.state = DriverState.AWAITING_SETUP
        self.turn = 0
        self.grid: Grid | None = None
        self.constants: GameConstants | None = None
        self._brain: Brain | None = None

    # -- phases --

    def setup(self) -> None:
        if self.state is not DriverState.AWAITING_SETUP:
            raise RuntimeError("setup already done")
        self.grid, self.constants = read_setup(self._reader)
        self._brain = Brain(self.grid)
        self.state = DriverState.TURN_LOOP
        logger.info("Map %dx%d loaded, constants %s", self.grid.width, self.grid.height, self.constants)
        if self._config.diagnostics:
            logger.info("\n%s", self.grid.render())

    def play_turn(self) -> Command | None:
        """Process one turn; return the emitted command, or None at end of input."""
        if self.state is DriverState.AWAITING_SETUP:
            self.setup()
        records = read_turn(self._reader)
        if records is None:
            return None
        entities = classify(records)
        if self._config.diagnostics:
            for line in entities.describe():
                logger.info(line)
            logger.info("Me : %s", describe_controlled_unit(entities.me))
        command = self._brain.decide(entities)
        write_command(self._out, command)
        self.turn += 1
        return command

    def run(self) -> int:
        """Play until the input ends or ``max_turns`` is reached; return turns played."""
        limit = self._config.max_turns
        while limit is None or self.turn < limit:
            if self.play_turn() is None:
                logger.info("Input closed after %d turns.", self.turn)
                break
        return self.turn
