"""Domain package exports for records, screens, and ports."""

from .entities import Artist, Event, Venue
from .ports import EventId, EventRepository, Navigator, UseCaseError
from .screens import Screen

__all__ = [
    "Artist",
    "Event",
    "EventId",
    "EventRepository",
    "Navigator",
    "Screen",
    "UseCaseError",
    "Venue",
]
