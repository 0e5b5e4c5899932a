"""Configuration helpers for the VictorOps client."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

DEFAULT_BASE_URL = "https://api.victorops.com"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENV_API_ID = "VICTOROPS_API_ID"
ENV_API_KEY = "VICTOROPS_API_KEY"
ENV_BASE_URL = "VICTOROPS_BASE_URL"
ENV_TIMEOUT_MS = "VICTOROPS_TIMEOUT_MS"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    api_id: str
    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "ClientConfig":
        api_id = _trim_or_none(os.getenv(ENV_API_ID))
        api_key = _trim_or_none(os.getenv(ENV_API_KEY))
        if api_id is None or api_key is None:
            raise ValueError(f"{ENV_API_ID} and {ENV_API_KEY} must be set")

        base_url = _trim_or_none(os.getenv(ENV_BASE_URL)) or DEFAULT_BASE_URL
        timeout_ms = _parse_positive_int(os.getenv(ENV_TIMEOUT_MS))
        timeout_seconds = (timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS

        return cls(api_id=api_id, api_key=api_key, base_url=base_url, timeout_seconds=timeout_seconds)


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None
