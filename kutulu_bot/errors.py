"""Error taxonomy.

Every error here is fatal for the bot: the turn driver never recovers from
one and the CLI exits without emitting a command for the offending turn.
"""

from __future__ import annotations


class BotError(Exception):
    """Base class for all bot failures."""


class ProtocolError(BotError):
    """The input line stream is truncated or malformed."""


class MapParseError(BotError):
    """The initial map cannot be loaded."""


class ClassificationError(BotError):
    """A turn's entity records cannot be classified."""


class UnknownEntityTypeError(ClassificationError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"unrecognized entity type {tag!r}")
        self.tag = tag


class UnknownLifecycleStateError(ClassificationError):
    def __init__(self, entity_id: int, state: int) -> None:
        super().__init__(f"unrecognized state {state} for entity {entity_id}")
        self.entity_id = entity_id
        self.state = state


class MissingControlledUnitError(ClassificationError):
    def __init__(self) -> None:
        super().__init__("turn reported no controlled unit")


class SpatialQueryError(BotError):
    """A spatial query precondition or invariant was violated."""


class EmptyInputError(SpatialQueryError):
    """``nearest``/``farthest`` was called without candidates."""


class NoEscapeError(SpatialQueryError):
    """No empty cell lies within the evasion radius."""
