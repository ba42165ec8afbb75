"""Draft state for the event editor screen.

Call context:
    The editor screen calls ``load_event`` on entry, binds its widgets to
    ``ui_state`` and forwards user edits to the ``update_*`` commands.

State machine:
    ``Loading`` -> ``Success`` on load, ``Success`` -> ``Success`` on every
    edit, ``Loading`` -> ``Error`` when the repository fails. ``Error`` stays
    until the next ``load_event``.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Set, Union

from beacon.domain.entities import Artist, Event, Venue
from beacon.domain.ports import EventId, EventRepository, UseCaseError
from beacon.usecases.load_event import LoadEvent

from .observable import MutableStateFlow, StateFlow

LOGGER = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load event"


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Success:
    """Loaded event: ``saved_event`` is the baseline, ``temp_event`` the draft."""
    uuid: str
    saved_event: Event
    temp_event: Event


@dataclass(frozen=True)
class Error:
    message: str


EventEditorState = Union[Loading, Success, Error]


class EventEditorVM:
    """Holds the editor's baseline and draft event, no persistence here."""

    def __init__(self, repository: EventRepository, *, loader: Optional[LoadEvent] = None) -> None:
        self._load = loader or LoadEvent(repository)
        self._state: MutableStateFlow[EventEditorState] = MutableStateFlow(Loading())
        self.ui_state: StateFlow[EventEditorState] = self._state.as_state_flow()
        self._load_seq = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> EventEditorState:
        return self._state.value

    @property
    def has_unsaved_changes(self) -> bool:
        state = self._state.value
        return isinstance(state, Success) and state.temp_event != state.saved_event

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load_event(self, event_id: Optional[EventId], uuid: str) -> Optional[asyncio.Task]:
        """Start loading ``event_id`` (a new event when ``None``) under token ``uuid``.

        Must be called from a running event loop; without one it raises
        ``RuntimeError`` and leaves the current state untouched. Returns the
        spawned task, or ``None`` when the same ``uuid`` is already loaded.

        Only the most recent call may publish its result; a slower, older
        fetch that completes afterwards is dropped.
        """
        LOGGER.info("Loading edit event ID %s", event_id)
        state = self._state.value
        if isinstance(state, Success) and state.uuid == uuid:
            LOGGER.debug("Loading edit event - skipping due to already being loaded")
            return None
        loop = asyncio.get_running_loop()
        self._load_seq += 1
        self._state.value = Loading()
        task = loop.create_task(self._run_load(event_id, uuid, self._load_seq))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run_load(self, event_id: Optional[EventId], uuid: str, seq: int) -> None:
        try:
            event = await self._load(event_id)
        except UseCaseError as exc:
            if seq != self._load_seq:
                LOGGER.debug("Loading edit event - dropping stale failure for %s", event_id)
                return
            LOGGER.error("Failed to load event %s [%s]: %s", event_id, exc.code, exc.message, exc_info=exc)
            self._state.value = Error(LOAD_FAILED_MESSAGE)
            return
        except Exception:
            if seq != self._load_seq:
                LOGGER.debug("Loading edit event - dropping stale failure for %s", event_id)
                return
            LOGGER.exception("Unexpected failure loading event %s", event_id)
            self._state.value = Error(LOAD_FAILED_MESSAGE)
            return
        if seq != self._load_seq:
            LOGGER.debug("Loading edit event - dropping stale result for %s", event_id)
            return
        self._state.value = Success(uuid=uuid, saved_event=event, temp_event=copy.deepcopy(event))
        LOGGER.info("Loaded edit event %s", event_id)

    # ------------------------------------------------------------------
    # Draft edits
    # ------------------------------------------------------------------
    def update_headliner(self, headliner: Optional[Artist]) -> None:
        LOGGER.info("Updating headliner %s", headliner)
        state = self._current_success("Updating headliner")
        if state is None:
            return
        LOGGER.debug("Updating headliner - previous artists %s", state.temp_event.artists)
        draft = copy.deepcopy(state.temp_event)
        artists = [artist for artist in draft.artists if not artist.headliner]
        if headliner is not None:
            artists.append(replace(headliner, headliner=True))
        LOGGER.debug("Updating headliner - new artists %s", artists)
        self._publish(state, replace(draft, artists=artists))
        LOGGER.info("Updated headliner - success")

    def add_opener(self, opener: Artist) -> None:
        LOGGER.info("Adding opener %s", opener)
        state = self._current_success("Updating openers")
        if state is None:
            return
        LOGGER.debug("Adding opener - previous artists %s", state.temp_event.artists)
        draft = copy.deepcopy(state.temp_event)
        draft.artists.append(copy.copy(opener))
        LOGGER.debug("Adding opener - new artists %s", draft.artists)
        self._publish(state, draft)
        LOGGER.info("Adding opener - success")

    def remove_opener(self, opener: Artist) -> None:
        LOGGER.info("Removing opener %s", opener)
        state = self._current_success("Updating openers")
        if state is None:
            return
        LOGGER.debug("Removing opener - previous artists %s", state.temp_event.artists)
        draft = copy.deepcopy(state.temp_event)
        if opener in draft.artists:
            draft.artists.remove(opener)
        LOGGER.debug("Removing opener - new artists %s", draft.artists)
        self._publish(state, draft)
        LOGGER.info("Removing opener - success")

    def update_venue(self, venue: Venue) -> None:
        LOGGER.info("Updating venue %s", venue)
        state = self._current_success("Updating venue")
        if state is None:
            return
        LOGGER.debug("Updating venue - previous venue %s", state.temp_event.venue)
        self._publish(state, replace(copy.deepcopy(state.temp_event), venue=copy.copy(venue)))
        LOGGER.info("Updated venue - success")

    def update_date(self, new_date: date) -> None:
        LOGGER.info("Updating date %s", new_date)
        state = self._current_success("Updating date")
        if state is None:
            return
        LOGGER.debug("Updating date - previous date %s", state.temp_event.date)
        self._publish(state, replace(copy.deepcopy(state.temp_event), date=new_date))
        LOGGER.info("Updated date - success")

    def update_purchased(self, purchased: bool) -> None:
        LOGGER.info("Updating purchased %s", purchased)
        state = self._current_success("Updating purchased")
        if state is None:
            return
        LOGGER.debug("Updating purchased - previous purchased %s", state.temp_event.purchased)
        self._publish(state, replace(copy.deepcopy(state.temp_event), purchased=bool(purchased)))
        LOGGER.info("Updated purchased - success")

    def discard_changes(self) -> None:
        """Reset the draft to a fresh copy of the baseline."""
        LOGGER.info("Discarding event changes")
        state = self._current_success("Discarding changes")
        if state is None:
            return
        self._publish(state, copy.deepcopy(state.saved_event))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _current_success(self, action: str) -> Optional[Success]:
        state = self._state.value
        if not isinstance(state, Success):
            LOGGER.debug("%s - not in success state", action)
            return None
        return state

    def _publish(self, state: Success, temp_event: Event) -> None:
        self._state.value = Success(
            uuid=state.uuid,
            saved_event=state.saved_event,
            temp_event=temp_event,
        )


__all__ = [
    "Error",
    "EventEditorState",
    "EventEditorVM",
    "LOAD_FAILED_MESSAGE",
    "Loading",
    "Success",
]
