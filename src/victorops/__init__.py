"""VictorOps Python client SDK.

This module uses lazy exports so lightweight pieces (for example config parsing or
the error types) can be imported without importing the HTTP stack.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "AddressFormatError",
    "Admin",
    "AllContactResponse",
    "ApiError",
    "ApiEscalationPolicy",
    "ApiEscalationPolicySchedule",
    "ApiOnCallEntry",
    "ApiOnCallOverride",
    "ApiOnCallRoll",
    "ApiTeam",
    "ApiTeamSchedule",
    "ApiUser",
    "ApiUserSchedule",
    "AsyncRequestExecutor",
    "AsyncVictorOps",
    "AuthenticationError",
    "ClientConfig",
    "ClientTimeoutError",
    "Contact",
    "ContactGroup",
    "ContactType",
    "EmailsResponse",
    "EncodingError",
    "EscalationPolicy",
    "EscalationPolicyList",
    "EscalationPolicyListDetail",
    "EscalationPolicyListElement",
    "EscalationPolicyStepEntry",
    "EscalationPolicySteps",
    "GetAllContactResponse",
    "HeaderValueError",
    "HookRegistry",
    "Incident",
    "IncidentResponse",
    "InvalidInputError",
    "NotFoundError",
    "PagedEntity",
    "PagedPolicy",
    "RequestCall",
    "RequestDetails",
    "RoutingKey",
    "RoutingKeyResponse",
    "RoutingKeyResponseList",
    "RoutingKeyResponseTargets",
    "SyncRequestExecutor",
    "TakeRequest",
    "TakeResponse",
    "Team",
    "TeamAdmins",
    "TeamMembers",
    "Transition",
    "TransportError",
    "User",
    "UserList",
    "UserListV2",
    "VictorOps",
    "VictorOpsError",
]

_MODEL_NAMES = (
    "Admin",
    "AllContactResponse",
    "ApiEscalationPolicy",
    "ApiEscalationPolicySchedule",
    "ApiOnCallEntry",
    "ApiOnCallOverride",
    "ApiOnCallRoll",
    "ApiTeam",
    "ApiTeamSchedule",
    "ApiUser",
    "ApiUserSchedule",
    "Contact",
    "ContactGroup",
    "ContactType",
    "EmailsResponse",
    "EscalationPolicy",
    "EscalationPolicyList",
    "EscalationPolicyListDetail",
    "EscalationPolicyListElement",
    "EscalationPolicyStepEntry",
    "EscalationPolicySteps",
    "GetAllContactResponse",
    "Incident",
    "IncidentResponse",
    "PagedEntity",
    "PagedPolicy",
    "RequestDetails",
    "RoutingKey",
    "RoutingKeyResponse",
    "RoutingKeyResponseList",
    "RoutingKeyResponseTargets",
    "TakeRequest",
    "TakeResponse",
    "Team",
    "TeamAdmins",
    "TeamMembers",
    "Transition",
    "User",
    "UserList",
    "UserListV2",
)

_EXPORTS: dict[str, tuple[str, str]] = {
    "AsyncVictorOps": (".client", "AsyncVictorOps"),
    "VictorOps": (".client", "VictorOps"),
    "ClientConfig": (".config", "ClientConfig"),
    "AddressFormatError": (".errors", "AddressFormatError"),
    "ApiError": (".errors", "ApiError"),
    "AuthenticationError": (".errors", "AuthenticationError"),
    "ClientTimeoutError": (".errors", "ClientTimeoutError"),
    "EncodingError": (".errors", "EncodingError"),
    "HeaderValueError": (".errors", "HeaderValueError"),
    "InvalidInputError": (".errors", "InvalidInputError"),
    "NotFoundError": (".errors", "NotFoundError"),
    "TransportError": (".errors", "TransportError"),
    "VictorOpsError": (".errors", "VictorOpsError"),
    "HookRegistry": (".hooks", "HookRegistry"),
    "RequestCall": (".hooks", "RequestCall"),
    "AsyncRequestExecutor": (".protocols", "AsyncRequestExecutor"),
    "SyncRequestExecutor": (".protocols", "SyncRequestExecutor"),
    **{name: (".models", name) for name in _MODEL_NAMES},
}

if TYPE_CHECKING:
    from .client import AsyncVictorOps, VictorOps
    from .config import ClientConfig
    from .errors import (
        AddressFormatError,
        ApiError,
        AuthenticationError,
        ClientTimeoutError,
        EncodingError,
        HeaderValueError,
        InvalidInputError,
        NotFoundError,
        TransportError,
        VictorOpsError,
    )
    from .hooks import HookRegistry, RequestCall
    from .models import (
        Admin,
        AllContactResponse,
        ApiEscalationPolicy,
        ApiEscalationPolicySchedule,
        ApiOnCallEntry,
        ApiOnCallOverride,
        ApiOnCallRoll,
        ApiTeam,
        ApiTeamSchedule,
        ApiUser,
        ApiUserSchedule,
        Contact,
        ContactGroup,
        ContactType,
        EmailsResponse,
        EscalationPolicy,
        EscalationPolicyList,
        EscalationPolicyListDetail,
        EscalationPolicyListElement,
        EscalationPolicyStepEntry,
        EscalationPolicySteps,
        GetAllContactResponse,
        Incident,
        IncidentResponse,
        PagedEntity,
        PagedPolicy,
        RequestDetails,
        RoutingKey,
        RoutingKeyResponse,
        RoutingKeyResponseList,
        RoutingKeyResponseTargets,
        TakeRequest,
        TakeResponse,
        Team,
        TeamAdmins,
        TeamMembers,
        Transition,
        User,
        UserList,
        UserListV2,
    )
    from .protocols import AsyncRequestExecutor, SyncRequestExecutor


def __getattr__(name: str) -> Any:
    module_info = _EXPORTS.get(name)
    if module_info is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute = module_info
    module = import_module(module_name, __name__)
    value = getattr(module, attribute)
    globals()[name] = value
    return value
