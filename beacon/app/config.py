"""Typed runtime configuration for the beacon app.

Values come from a flat mapping (``AppConfig.from_dict``) or from ``BEACON_*``
environment variables (``load_config``). Coercion mirrors what a settings form
would send: strings for everything, trimmed and converted here.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

from beacon.utils.logging import env_truthy

_ENV_KEYS: Dict[str, str] = {
    "api_base_url": "BEACON_API_BASE_URL",
    "api_key": "BEACON_API_KEY",
    "request_timeout_s": "BEACON_REQUEST_TIMEOUT_S",
    "retries": "BEACON_RETRIES",
    "debug_logging": "BEACON_DEBUG",
}


@dataclass(frozen=True)
class AppConfig:
    """Settings needed to wire repositories and logging."""

    api_base_url: str = ""
    api_key: str = ""
    request_timeout_s: int = 10
    retries: int = 2
    debug_logging: bool = False

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "AppConfig":
        """Build a config from flat keys.

        Raises:
            ValueError: For unknown keys or values that cannot be coerced.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Config payload must be a mapping of flat keys.")
        allowed = {f.name for f in fields(cls)}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported config keys: {', '.join(sorted(str(key) for key in unknown))}")

        values: Dict[str, Any] = {}
        if "api_base_url" in payload:
            values["api_base_url"] = _coerce_str(payload["api_base_url"]).rstrip("/")
        if "api_key" in payload:
            values["api_key"] = _coerce_str(payload["api_key"])
        if "request_timeout_s" in payload:
            values["request_timeout_s"] = _coerce_int("request_timeout_s", payload["request_timeout_s"], minimum=1)
        if "retries" in payload:
            values["retries"] = _coerce_int("retries", payload["retries"], minimum=0)
        if "debug_logging" in payload:
            values["debug_logging"] = _coerce_bool(payload["debug_logging"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Read ``BEACON_*`` variables; unset variables keep their defaults."""
    env = os.environ if environ is None else environ
    payload = {key: env[var] for key, var in _ENV_KEYS.items() if env.get(var) is not None}
    return AppConfig.from_dict(payload)


def _coerce_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return env_truthy(value)
    return bool(value)


def _coerce_int(name: str, value: Any, *, minimum: int) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer.") from exc
    else:
        raise ValueError(f"{name} must be an integer.")
    if coerced < minimum:
        raise ValueError(f"{name} must be at least {minimum}.")
    return coerced


__all__ = ["AppConfig", "load_config"]
