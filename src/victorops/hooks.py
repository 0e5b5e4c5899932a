"""Request hook registry for the VictorOps client."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from .models import RequestDetails


@dataclass(slots=True)
class RequestCall:
    operation: str
    method: str
    path: str
    query: dict[str, Any] | None = None
    json_body: Any | None = None


BeforeHook = Callable[[RequestCall], None | Awaitable[None]]
AfterHook = Callable[[RequestCall, RequestDetails], None | Awaitable[None]]
ErrorHook = Callable[[RequestCall, Exception], None | Awaitable[None]]


@dataclass(slots=True)
class HookRegistry:
    """Observers keyed by operation name, or ``*`` for every operation."""

    _before: dict[str, list[BeforeHook]] = field(default_factory=dict)
    _after: dict[str, list[AfterHook]] = field(default_factory=dict)
    _error: dict[str, list[ErrorHook]] = field(default_factory=dict)

    def add_before(self, operation: str, hook: BeforeHook) -> None:
        self._before.setdefault(operation, []).append(hook)

    def add_after(self, operation: str, hook: AfterHook) -> None:
        self._after.setdefault(operation, []).append(hook)

    def add_error(self, operation: str, hook: ErrorHook) -> None:
        self._error.setdefault(operation, []).append(hook)

    def run_before(self, call: RequestCall) -> None:
        for hook in self._match(self._before, call.operation):
            _reject_awaitable(hook(call), "before")

    def run_after(self, call: RequestCall, details: RequestDetails) -> None:
        for hook in self._match(self._after, call.operation):
            _reject_awaitable(hook(call, details), "after")

    def run_error(self, call: RequestCall, error: Exception) -> None:
        for hook in self._match(self._error, call.operation):
            _reject_awaitable(hook(call, error), "error")

    async def run_before_async(self, call: RequestCall) -> None:
        for hook in self._match(self._before, call.operation):
            result = hook(call)
            if inspect.isawaitable(result):
                await result

    async def run_after_async(self, call: RequestCall, details: RequestDetails) -> None:
        for hook in self._match(self._after, call.operation):
            result = hook(call, details)
            if inspect.isawaitable(result):
                await result

    async def run_error_async(self, call: RequestCall, error: Exception) -> None:
        for hook in self._match(self._error, call.operation):
            result = hook(call, error)
            if inspect.isawaitable(result):
                await result

    @staticmethod
    def _match(registry: dict[str, list[Any]], operation: str) -> list[Any]:
        return [*registry.get("*", []), *registry.get(operation, [])]


def _reject_awaitable(result: Any, kind: str) -> None:
    if not inspect.isawaitable(result):
        return
    # Close the coroutine so it is not reported as never awaited.
    close = getattr(result, "close", None)
    if callable(close):
        close()
    raise TypeError(f"sync clients cannot execute async {kind} hooks")
