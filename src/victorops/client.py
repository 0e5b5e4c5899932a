"""Top-level VictorOps clients (sync + async)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

import httpx

from .api import (
    ContactsApi,
    EscalationPoliciesApi,
    IncidentsApi,
    OnCallApi,
    RoutingKeysApi,
    TeamsApi,
    UsersApi,
)
from .async_api import (
    AsyncContactsApi,
    AsyncEscalationPoliciesApi,
    AsyncIncidentsApi,
    AsyncOnCallApi,
    AsyncRoutingKeysApi,
    AsyncTeamsApi,
    AsyncUsersApi,
)
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, ClientConfig
from .hooks import HookRegistry, RequestCall
from .models import RequestDetails
from .protocols import AsyncRequestExecutor, SyncRequestExecutor
from .transport import AsyncTransport, SyncTransport


class VictorOps:
    """Synchronous VictorOps client.

    Holds only immutable configuration and a shared ``httpx.Client``, so one
    instance may serve concurrent callers.
    """

    def __init__(
        self,
        *,
        api_id: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.Client | None = None,
        request_executor: SyncRequestExecutor | None = None,
        hook_registry: HookRegistry | None = None,
    ) -> None:
        self.client_config = ClientConfig(
            api_id=api_id,
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
        self._hooks = hook_registry or HookRegistry()
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout_seconds, follow_redirects=True)
        self._transport = SyncTransport(self._client, self.client_config)
        self._executor = request_executor or self._transport

        self.incidents = IncidentsApi(self._request)
        self.users = UsersApi(self._request)
        self.teams = TeamsApi(self._request)
        self.oncall = OnCallApi(self._request)
        self.policies = EscalationPoliciesApi(self._request)
        self.routing_keys = RoutingKeysApi(self._request)
        self.contacts = ContactsApi(self._request)

    @classmethod
    def from_env(cls) -> "VictorOps":
        return cls.from_config(ClientConfig.from_env())

    @classmethod
    def from_config(cls, cfg: ClientConfig, **kwargs: Any) -> "VictorOps":
        return cls(
            api_id=cfg.api_id,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_seconds=cfg.timeout_seconds,
            **kwargs,
        )

    def before(self, operation: str = "*") -> Callable[[Callable[[RequestCall], Any]], Callable[[RequestCall], Any]]:
        def decorator(func: Callable[[RequestCall], Any]) -> Callable[[RequestCall], Any]:
            self._hooks.add_before(operation, func)
            return func

        return decorator

    def after(
        self, operation: str = "*"
    ) -> Callable[[Callable[[RequestCall, RequestDetails], Any]], Callable[[RequestCall, RequestDetails], Any]]:
        def decorator(func: Callable[[RequestCall, RequestDetails], Any]) -> Callable[[RequestCall, RequestDetails], Any]:
            self._hooks.add_after(operation, func)
            return func

        return decorator

    def on_error(
        self, operation: str = "*"
    ) -> Callable[[Callable[[RequestCall, Exception], Any]], Callable[[RequestCall, Exception], Any]]:
        def decorator(func: Callable[[RequestCall, Exception], Any]) -> Callable[[RequestCall, Exception], Any]:
            self._hooks.add_error(operation, func)
            return func

        return decorator

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "VictorOps":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __str__(self) -> str:
        return f"VictorOps Client: publicBaseURL: {self.client_config.base_url}"

    def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> RequestDetails:
        call = RequestCall(
            operation=operation,
            method=method.upper(),
            path=path,
            query=dict(query) if query else None,
            json_body=json_body,
        )

        self._hooks.run_before(call)
        try:
            details = self._executor.request(
                operation=call.operation,
                method=call.method,
                path=call.path,
                query=call.query,
                json_body=call.json_body,
            )
        except Exception as error:
            self._hooks.run_error(call, error)
            raise

        self._hooks.run_after(call, details)
        return details


class AsyncVictorOps:
    """Asynchronous VictorOps client."""

    def __init__(
        self,
        *,
        api_id: str,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        http_client: httpx.AsyncClient | None = None,
        request_executor: AsyncRequestExecutor | None = None,
        hook_registry: HookRegistry | None = None,
    ) -> None:
        self.client_config = ClientConfig(
            api_id=api_id,
            api_key=api_key,
            base_url=base_url,
            timeout_seconds=timeout_seconds,
        )
        self._hooks = hook_registry or HookRegistry()
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout_seconds, follow_redirects=True)
        self._transport = AsyncTransport(self._client, self.client_config)
        self._executor = request_executor or self._transport

        self.incidents = AsyncIncidentsApi(self._request)
        self.users = AsyncUsersApi(self._request)
        self.teams = AsyncTeamsApi(self._request)
        self.oncall = AsyncOnCallApi(self._request)
        self.policies = AsyncEscalationPoliciesApi(self._request)
        self.routing_keys = AsyncRoutingKeysApi(self._request)
        self.contacts = AsyncContactsApi(self._request)

    @classmethod
    def from_env(cls) -> "AsyncVictorOps":
        return cls.from_config(ClientConfig.from_env())

    @classmethod
    def from_config(cls, cfg: ClientConfig, **kwargs: Any) -> "AsyncVictorOps":
        return cls(
            api_id=cfg.api_id,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_seconds=cfg.timeout_seconds,
            **kwargs,
        )

    def before(self, operation: str = "*") -> Callable[[Callable[[RequestCall], Any]], Callable[[RequestCall], Any]]:
        def decorator(func: Callable[[RequestCall], Any]) -> Callable[[RequestCall], Any]:
            self._hooks.add_before(operation, func)
            return func

        return decorator

    def after(
        self, operation: str = "*"
    ) -> Callable[[Callable[[RequestCall, RequestDetails], Any]], Callable[[RequestCall, RequestDetails], Any]]:
        def decorator(func: Callable[[RequestCall, RequestDetails], Any]) -> Callable[[RequestCall, RequestDetails], Any]:
            self._hooks.add_after(operation, func)
            return func

        return decorator

    def on_error(
        self, operation: str = "*"
    ) -> Callable[[Callable[[RequestCall, Exception], Any]], Callable[[RequestCall, Exception], Any]]:
        def decorator(func: Callable[[RequestCall, Exception], Any]) -> Callable[[RequestCall, Exception], Any]:
            self._hooks.add_error(operation, func)
            return func

        return decorator

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncVictorOps":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def __str__(self) -> str:
        return f"VictorOps Client: publicBaseURL: {self.client_config.base_url}"

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        *,
        query: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> RequestDetails:
        call = RequestCall(
            operation=operation,
            method=method.upper(),
            path=path,
            query=dict(query) if query else None,
            json_body=json_body,
        )

        await self._hooks.run_before_async(call)
        try:
            details = await self._executor.request(
                operation=call.operation,
                method=call.method,
                path=call.path,
                query=call.query,
                json_body=call.json_body,
            )
        except Exception as error:
            await self._hooks.run_error_async(call, error)
            raise

        await self._hooks.run_after_async(call, details)
        return details
