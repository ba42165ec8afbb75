from __future__ import annotations
from typing import Protocol

from .entities import Event

EventId = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class EventRepository(Protocol):
    """Read access to stored events.

    Any retrieval problem (transport, missing event, bad payload) surfaces as
    an exception; callers do not distinguish between them.
    """

    async def get_event(self, event_id: EventId) -> Event: ...


class Navigator(Protocol):
    """Route changes requested by view models."""

    def navigate(self, route: str) -> None: ...
