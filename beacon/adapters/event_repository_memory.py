from __future__ import annotations

import copy
from typing import Dict, Iterable, List, Optional

from beacon.domain.entities import Event
from beacon.domain.ports import EventId, EventRepository


class InMemoryEventRepository(EventRepository):
    """Dictionary-backed repository used offline and in tests.

    Events are copied on the way in and out so callers never share instances
    with the store.
    """

    def __init__(self, events: Optional[Iterable[Event]] = None) -> None:
        self._events: Dict[EventId, Event] = {}
        self.calls: List[EventId] = []
        for event in events or ():
            self.put(event)

    def put(self, event: Event) -> EventId:
        event_id = event.id or self._next_id()
        stored = copy.deepcopy(event)
        stored.id = event_id
        self._events[event_id] = stored
        return event_id

    async def get_event(self, event_id: EventId) -> Event:
        self.calls.append(event_id)
        if event_id not in self._events:
            raise KeyError(f"Unknown event id {event_id}")
        return copy.deepcopy(self._events[event_id])

    def _next_id(self) -> EventId:
        index = len(self._events) + 1
        while f"event-{index}" in self._events:
            index += 1
        return f"event-{index}"
