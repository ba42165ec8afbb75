from __future__ import annotations

import asyncio
from typing import Dict, List

from beacon.domain.entities import Event


class GatedRepository:
    """Repository whose fetches block until the test releases them."""

    def __init__(self, events: Dict[str, Event]) -> None:
        self.events = events
        self.calls: List[str] = []
        self.gates: Dict[str, asyncio.Event] = {}

    def gate(self, event_id: str) -> asyncio.Event:
        return self.gates.setdefault(event_id, asyncio.Event())

    async def get_event(self, event_id: str) -> Event:
        self.calls.append(event_id)
        await self.gate(event_id).wait()
        if event_id not in self.events:
            raise LookupError(event_id)
        return self.events[event_id]


class RecordingNavigator:
    def __init__(self) -> None:
        self.routes: List[str] = []

    def navigate(self, route: str) -> None:
        self.routes.append(route)


__all__ = ["GatedRepository", "RecordingNavigator"]
