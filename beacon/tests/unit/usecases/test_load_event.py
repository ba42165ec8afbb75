from __future__ import annotations

import asyncio
from datetime import date

import pytest

from beacon.adapters.api_errors import ApiClientError
from beacon.adapters.event_repository_memory import InMemoryEventRepository
from beacon.domain.entities import Artist, Event, Venue
from beacon.domain.ports import UseCaseError
from beacon.usecases.load_event import LoadEvent


class _FailingRepository:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    async def get_event(self, event_id: str) -> Event:
        raise self.exc


def test_without_id_builds_blank_event_without_fetch() -> None:
    repo = InMemoryEventRepository()
    uc = LoadEvent(repository=repo, today=lambda: date(2025, 3, 4))

    event = asyncio.run(uc(None))

    assert event == Event(artists=[], date=date(2025, 3, 4), venue=Venue("", "", ""), purchased=False)
    assert repo.calls == []


def test_with_id_reads_repository() -> None:
    stored = Event(artists=[Artist("A", "Pop")], date=date(2024, 1, 1), venue=Venue.empty(), id="e1")
    repo = InMemoryEventRepository([stored])

    assert asyncio.run(LoadEvent(repository=repo)("e1")) == stored
    assert repo.calls == ["e1"]


def test_unknown_failure_maps_to_load_event_failed() -> None:
    uc = LoadEvent(repository=InMemoryEventRepository())

    with pytest.raises(UseCaseError) as info:
        asyncio.run(uc("missing"))

    assert info.value.code == "LOAD_EVENT_FAILED"
    assert isinstance(info.value.__cause__, KeyError)


def test_api_failure_uses_adapter_mapping() -> None:
    uc = LoadEvent(repository=_FailingRepository(ApiClientError("gone", status=404)))

    with pytest.raises(UseCaseError) as info:
        asyncio.run(uc("404"))

    assert info.value.code == "NOT_FOUND"


def test_use_case_error_passes_through() -> None:
    original = UseCaseError("CUSTOM", "custom failure")
    uc = LoadEvent(repository=_FailingRepository(original))

    with pytest.raises(UseCaseError) as info:
        asyncio.run(uc("x"))

    assert info.value is original
