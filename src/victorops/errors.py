"""Error hierarchy for the VictorOps Python client."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import RequestDetails


class VictorOpsError(Exception):
    """Base class for all client errors."""


class TransportError(VictorOpsError):
    """Raised when the HTTP exchange itself could not be completed."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"HTTP request failed: {cause}")
        self.cause = cause


class ClientTimeoutError(TransportError):
    """Raised when an exchange exceeds the configured timeout."""


class EncodingError(VictorOpsError):
    """Raised when a value cannot be rendered to or parsed from JSON."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"JSON serialization/deserialization failed: {cause}")
        self.cause = cause


class AddressFormatError(VictorOpsError):
    """Raised when the base URL or a constructed request URL is malformed."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"URL parsing failed: {cause}")
        self.cause = cause


class HeaderValueError(VictorOpsError):
    """Raised when a credential cannot be carried in an HTTP header."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"Invalid header value: {cause}")
        self.cause = cause


class ApiError(VictorOpsError):
    """Raised when the API answers with a status code >= 400.

    ``message`` is the raw response body, untouched.
    """

    def __init__(self, status: int, message: str, *, details: RequestDetails | None = None) -> None:
        super().__init__(f"API error: {status} - {message}")
        self.status = status
        self.message = message
        self.details = details


class AuthenticationError(VictorOpsError):
    """Reserved for callers that want to single out credential failures."""

    def __init__(self) -> None:
        super().__init__("Authentication failed")


class NotFoundError(VictorOpsError):
    """Raised when a client-side scan over a listing finds no match."""

    def __init__(self) -> None:
        super().__init__("Resource not found")


class InvalidInputError(VictorOpsError):
    """Raised before any network call when an argument cannot be used."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid input: {detail}")
        self.detail = detail
