from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import quote

from beacon.domain.entities import Event
from beacon.domain.ports import EventId, EventRepository

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    build_error_message,
    error_detail,
)
from .http_client import HttpConfig, RetryingSession

LOGGER = logging.getLogger(__name__)


class EventRestAdapter(EventRepository):
    """REST adapter that reads events from the concert API.

    Requests are blocking, so ``get_event`` hands them to a worker thread and
    the event loop stays free while the call is in flight.
    """

    def __init__(
        self,
        base_url: str,
        *,
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 2,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("EventRestAdapter requires a base URL")
        self.base_url = base_url.strip().rstrip("/")
        self.session = RetryingSession(
            api_key,
            HttpConfig(request_timeout_s=request_timeout_s, retries=retries),
        )

    async def get_event(self, event_id: EventId) -> Event:
        return await asyncio.to_thread(self.fetch_event, event_id)

    def fetch_event(self, event_id: EventId) -> Event:
        """Blocking ``GET /events/{id}`` returning the decoded event.

        Raises:
            ApiClientError: HTTP 4xx (for example an unknown id).
            ApiServerError: HTTP 5xx.
            ApiTimeoutError: Timeouts or connection failures after retries.
            ApiError: The body is not a valid event payload.
        """
        url = f"{self.base_url}/events/{quote(str(event_id), safe='')}"
        ctx = f"GET event {event_id}"
        LOGGER.debug("Fetching event %s from %s", event_id, url)
        resp = self.session.get(url)
        self._ensure_ok(resp, ctx)
        payload = self._json(resp, ctx)
        try:
            event = Event.from_dict(payload)
        except ValueError as exc:
            raise ApiError(f"{ctx}: invalid event payload ({exc})", context=ctx) from exc
        if event.id is None:
            event.id = str(event_id)
        return event

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _json(resp: Any, ctx: str) -> Any:
        try:
            return resp.json()
        except ValueError as exc:
            raise ApiError(f"{ctx}: response is not JSON", context=ctx) from exc

    @staticmethod
    def _ensure_ok(resp: Any, ctx: str) -> None:
        status = int(getattr(resp, "status_code", 0) or 0)
        if 200 <= status < 300:
            return
        detail = error_detail(resp)
        message = build_error_message(ctx, status, detail)
        if 400 <= status < 500:
            raise ApiClientError(message, status=status, detail=detail, context=ctx)
        if status >= 500:
            raise ApiServerError(message, status=status, detail=detail, context=ctx)
        raise ApiError(message, status=status, detail=detail, context=ctx)


__all__ = ["EventRestAdapter"]
