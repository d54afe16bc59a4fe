"""Bot configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BotConfig:
    """Immutable configuration for a bot run."""

    # Logging
    log_level: str = "INFO"
    diagnostics: bool = True       # Map + entity dump on stderr every turn

    # Turn loop
    max_turns: int | None = None   # None = play until the referee closes stdin

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000


@dataclass(frozen=True)
class GameConstants:
    """Game parameters sent once after the map.

    Parsed to keep the stream aligned; the decision logic does not use them.
    """

    sanity_loss_lonely: int
    sanity_loss_group: int
    hostile_spawn_time: int
    hostile_life_time: int
