"""Engine layer: referee line protocol and the turn driver."""

from kutulu_bot.engine.turn_driver import DriverState, TurnDriver

__all__ = ["DriverState", "TurnDriver"]
