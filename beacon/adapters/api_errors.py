"""Typed failures raised by the events API adapter.

The events API reports errors as ``{"detail": "<text>"}``. Anything else in an
error response is reduced to a short text snippet.
"""

from __future__ import annotations

from typing import Any, Optional

_SNIPPET_LIMIT = 200


class ApiError(RuntimeError):
    """Base class for events API adapter failures.

    ``detail`` is the server's explanation, when it sent one.
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        detail: Optional[str] = None,
        context: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.detail = detail
        self.context = context


class ApiClientError(ApiError):
    """HTTP 4xx: unknown event id, bad credentials, malformed request."""


class ApiServerError(ApiError):
    """HTTP 5xx from the events API."""


class ApiTimeoutError(ApiError):
    """Transport level timeout or connectivity failure."""

    def __init__(self, message: str, *, context: Optional[str] = None) -> None:
        super().__init__(message, context=context)


def error_detail(resp: Any) -> Optional[str]:
    """Return the ``detail`` text of an error response, else a body snippet."""
    try:
        payload = resp.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        detail = payload.get("detail")
        if isinstance(detail, str) and detail.strip():
            return detail.strip()[:_SNIPPET_LIMIT]
    text = (getattr(resp, "text", "") or "").strip()
    return text[:_SNIPPET_LIMIT] or None


def build_error_message(ctx: str, status: int, detail: Optional[str]) -> str:
    if detail:
        return f"{ctx}: {detail} (HTTP {status})"
    return f"{ctx}: HTTP {status}"
