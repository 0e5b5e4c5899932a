"""HTTP transport for the VictorOps client."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from .config import ClientConfig
from .errors import (
    AddressFormatError,
    ApiError,
    ClientTimeoutError,
    EncodingError,
    HeaderValueError,
    TransportError,
)
from .models import RequestDetails

logger = logging.getLogger(__name__)

API_PREFIX = "api-public"
API_ID_HEADER = "X-VO-Api-Id"
API_KEY_HEADER = "X-VO-Api-Key"
EMPTY_BODY = "{}"


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    method: str
    url: httpx.URL
    headers: dict[str, str]
    params: dict[str, str] | None
    body: str


def build_url(base_url: str, path: str) -> httpx.URL:
    raw = f"{base_url.rstrip('/')}/{API_PREFIX}/{path.lstrip('/')}"
    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as error:
        raise AddressFormatError(str(error)) from error

    if url.scheme not in ("http", "https") or not url.host:
        raise AddressFormatError(f"{raw!r} is not an absolute http(s) URL")
    return url


def build_headers(config: ClientConfig) -> dict[str, str]:
    _check_header_value(API_ID_HEADER, config.api_id)
    _check_header_value(API_KEY_HEADER, config.api_key)
    return {
        API_ID_HEADER: config.api_id,
        API_KEY_HEADER: config.api_key,
        "Content-Type": "application/json",
    }


def encode_query(params: Mapping[str, Any] | None) -> dict[str, str] | None:
    if not params:
        return None

    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
            continue
        encoded[key] = str(value)
    return encoded or None


def encode_body(json_body: Any | None) -> str:
    if json_body is None:
        # Some verbs are rejected with an entirely empty body.
        return EMPTY_BODY
    try:
        return json.dumps(json_body, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as error:
        raise EncodingError(str(error)) from error


def prepare_request(
    config: ClientConfig,
    *,
    method: str,
    path: str,
    query: Mapping[str, Any] | None = None,
    json_body: Any | None = None,
) -> PreparedRequest:
    return PreparedRequest(
        method=method.upper(),
        url=build_url(config.base_url, path),
        headers=build_headers(config),
        params=encode_query(query),
        body=encode_body(json_body),
    )


def validate_status(response: httpx.Response, prepared: PreparedRequest) -> RequestDetails:
    details = RequestDetails(
        status_code=response.status_code,
        response_body=response.text,
        request_body=prepared.body,
    )
    logger.debug("%s %s -> %s", prepared.method, prepared.url.path, response.status_code)
    if response.status_code >= 400:
        raise ApiError(response.status_code, response.text, details=details)
    return details


def _check_header_value(name: str, value: str) -> None:
    for char in value:
        if char == "\t" or 32 <= ord(char) < 127:
            continue
        raise HeaderValueError(f"{name} contains a character that is not allowed in a header")


class SyncTransport:
    def __init__(self, client: httpx.Client, config: ClientConfig) -> None:
        self._client = client
        self._config = config

    def request(
        self,
        *,
        operation: str,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> RequestDetails:
        prepared = prepare_request(self._config, method=method, path=path, query=query, json_body=json_body)

        try:
            response = self._client.request(
                prepared.method,
                prepared.url,
                params=prepared.params,
                content=prepared.body,
                headers=prepared.headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as error:
            raise ClientTimeoutError(str(error)) from error
        except httpx.InvalidURL as error:
            raise AddressFormatError(str(error)) from error
        except httpx.HTTPError as error:
            logger.debug("%s failed: %s", operation, error)
            raise TransportError(str(error)) from error

        return validate_status(response, prepared)


class AsyncTransport:
    def __init__(self, client: httpx.AsyncClient, config: ClientConfig) -> None:
        self._client = client
        self._config = config

    async def request(
        self,
        *,
        operation: str,
        method: str,
        path: str,
        query: Mapping[str, Any] | None = None,
        json_body: Any | None = None,
    ) -> RequestDetails:
        prepared = prepare_request(self._config, method=method, path=path, query=query, json_body=json_body)

        try:
            response = await self._client.request(
                prepared.method,
                prepared.url,
                params=prepared.params,
                content=prepared.body,
                headers=prepared.headers,
                timeout=self._config.timeout_seconds,
            )
        except httpx.TimeoutException as error:
            raise ClientTimeoutError(str(error)) from error
        except httpx.InvalidURL as error:
            raise AddressFormatError(str(error)) from error
        except httpx.HTTPError as error:
            logger.debug("%s failed: %s", operation, error)
            raise TransportError(str(error)) from error

        return validate_status(response, prepared)
