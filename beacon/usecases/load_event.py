from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..domain.entities import Event
from ..domain.ports import EventId, EventRepository, UseCaseError
from .error_mapping import map_api_error


@dataclass
class LoadEvent:
    """Fetch an existing event, or start a blank one when no id is given."""

    repository: EventRepository
    today: Callable[[], date] = date.today

    async def __call__(self, event_id: Optional[EventId]) -> Event:
        if event_id is None:
            return Event.new(self.today())
        try:
            return await self.repository.get_event(event_id)
        except UseCaseError:
            raise
        except Exception as e:
            raise map_api_error(e, default_code="LOAD_EVENT_FAILED") from e


__all__ = ["LoadEvent"]
