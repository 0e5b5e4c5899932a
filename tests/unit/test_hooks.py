from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest

from victorops import AsyncVictorOps, ContactType, VictorOps
from victorops.errors import ApiError
from victorops.hooks import HookRegistry, RequestCall
from victorops.models import RequestDetails

_OK = RequestDetails(status_code=200, response_body="{}", request_body="{}")


@dataclass
class _Executor:
    error: Exception | None = None
    bodies: dict[str, str] = field(default_factory=lambda: {"teams.list": "[]"})
    calls: list[dict[str, Any]] = field(default_factory=list)

    def request(self, **kwargs: Any) -> RequestDetails:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        body = self.bodies.get(kwargs["operation"])
        if body is None:
            return _OK
        return RequestDetails(status_code=200, response_body=body, request_body="{}")


@dataclass
class _AsyncExecutor:
    calls: list[dict[str, Any]] = field(default_factory=list)

    async def request(self, **kwargs: Any) -> RequestDetails:
        self.calls.append(kwargs)
        return _OK


def test_sync_registry_rejects_async_hooks() -> None:
    registry = HookRegistry()

    async def before(_call: RequestCall) -> None:
        return None

    registry.add_before("*", before)
    with pytest.raises(TypeError):
        registry.run_before(RequestCall(operation="teams.list", method="GET", path="v1/team"))


def test_wildcard_hooks_run_first() -> None:
    registry = HookRegistry()
    events: list[str] = []

    registry.add_before("teams.list", lambda _call: events.append("teams.list"))
    registry.add_before("*", lambda _call: events.append("*"))
    registry.add_before("users.list", lambda _call: events.append("users.list"))

    registry.run_before(RequestCall(operation="teams.list", method="GET", path="v1/team"))

    assert events == ["*", "teams.list"]


@pytest.mark.asyncio
async def test_async_registry_executes_async_hooks() -> None:
    registry = HookRegistry()
    events: list[str] = []

    async def before(_call: RequestCall) -> None:
        await asyncio.sleep(0)
        events.append("before")

    def after(_call: RequestCall, details: RequestDetails) -> None:
        events.append(f"after:{details.status_code}")

    registry.add_before("*", before)
    registry.add_after("*", after)

    call = RequestCall(operation="incidents.list", method="GET", path="v1/incidents")
    await registry.run_before_async(call)
    await registry.run_after_async(call, _OK)

    assert events == ["before", "after:200"]


def test_client_decorators_observe_each_exchange() -> None:
    executor = _Executor()
    client = VictorOps(api_id="id", api_key="key", request_executor=executor)
    seen: list[tuple[str, str, str]] = []

    @client.before()
    def record_before(call: RequestCall) -> None:
        seen.append(("before", call.operation, call.method))

    @client.after("users.delete")
    def record_after(call: RequestCall, details: RequestDetails) -> None:
        seen.append(("after", call.operation, str(call.json_body)))

    try:
        client.users.delete("jdoe", "jsmith")
        client.teams.list()
    finally:
        client.close()

    assert seen == [
        ("before", "users.delete", "DELETE"),
        ("after", "users.delete", "{'replacement': 'jsmith'}"),
        ("before", "teams.list", "GET"),
    ]
    assert len(executor.calls) == 2


def test_error_hook_sees_api_error_before_it_propagates() -> None:
    failure = ApiError(503, "Service Unavailable")
    executor = _Executor(error=failure)
    client = VictorOps(api_id="id", api_key="key", request_executor=executor)
    errors: list[Exception] = []
    after_calls: list[RequestCall] = []

    client.on_error("incidents.get")(lambda _call, error: errors.append(error))
    client.after()(lambda call, _details: after_calls.append(call))

    try:
        with pytest.raises(ApiError) as raised:
            client.incidents.get(7)
    finally:
        client.close()

    assert raised.value is failure
    assert errors == [failure]
    assert after_calls == []


def test_hooks_do_not_fire_for_calls_rejected_locally() -> None:
    executor = _Executor()
    client = VictorOps(api_id="id", api_key="key", request_executor=executor)
    seen: list[str] = []
    client.before()(lambda call: seen.append(call.operation))

    try:
        client.contacts.get_by_id("jdoe", 0, ContactType.DEVICE)
    finally:
        client.close()

    assert seen == []
    assert executor.calls == []


@pytest.mark.asyncio
async def test_async_client_runs_shared_registry() -> None:
    registry = HookRegistry()
    events: list[str] = []

    async def before(call: RequestCall) -> None:
        events.append(f"before:{call.operation}")

    registry.add_before("*", before)
    registry.add_after("*", lambda call, _details: events.append(f"after:{call.operation}"))

    executor = _AsyncExecutor()
    client = AsyncVictorOps(api_id="id", api_key="key", request_executor=executor, hook_registry=registry)
    try:
        await client.policies.delete("pol-1")
    finally:
        await client.close()

    assert events == ["before:policies.delete", "after:policies.delete"]
    assert executor.calls[0]["path"] == "v1/policies/pol-1"
