"""Protocol contracts for VictorOps client extension points."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from .models import RequestDetails


@runtime_checkable
class SyncRequestExecutor(Protocol):
    def request(
        self,
        *,
        operation: str,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> RequestDetails: ...


@runtime_checkable
class AsyncRequestExecutor(Protocol):
    async def request(
        self,
        *,
        operation: str,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> RequestDetails: ...
