"""FastAPI dependency injection — provides the BotSession singleton."""

from __future__ import annotations

from kutulu_bot.api.session import BotSession

_session: BotSession | None = None


def set_session(session: BotSession) -> None:
    global _session
    _session = session


def get_session() -> BotSession:
    if _session is None:
        raise RuntimeError("BotSession not initialized — server not started correctly.")
    return _session
