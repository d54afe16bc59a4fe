"""AI layer: entity classification, spatial queries and decision-making."""

from kutulu_bot.ai.brain import Brain
from kutulu_bot.ai.classifier import EntityRecord, TurnEntities, classify

__all__ = ["Brain", "EntityRecord", "TurnEntities", "classify"]
