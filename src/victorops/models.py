"""Public data models for the VictorOps client.

Payload records mirror the JSON documents of the public API. Fields the API does not
guarantee are optional and decode to ``None`` when the key is absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import EncodingError

T = TypeVar("T")

_adapter_cache: dict[Any, TypeAdapter[Any]] = {}


@dataclass(frozen=True, slots=True)
class RequestDetails:
    """Status code and raw bodies of a single HTTP exchange."""

    status_code: int
    response_body: str
    request_body: str


class ApiModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


# Incidents


class PagedEntity(ApiModel):
    name: str | None = None
    slug: str | None = None


class PagedPolicy(ApiModel):
    policy: PagedEntity | None = None
    team: PagedEntity | None = None


class Transition(ApiModel):
    name: str | None = Field(default=None, alias="Name")
    at: datetime | None = Field(default=None, alias="At")
    message: str | None = Field(default=None, alias="Message")
    by: str | None = Field(default=None, alias="By")
    manually: bool | None = Field(default=None, alias="Manually")
    alert_id: str | None = Field(default=None, alias="alertId")
    alert_url: str | None = Field(default=None, alias="alertUrl")


class Incident(ApiModel):
    alert_count: int | None = Field(default=None, alias="alertCount")
    current_phase: str | None = Field(default=None, alias="currentPhase")
    entity_display_name: str | None = Field(default=None, alias="entityDisplayName")
    entity_id: str | None = Field(default=None, alias="entityId")
    entity_state: str | None = Field(default=None, alias="entityState")
    entity_type: str | None = Field(default=None, alias="entityType")
    host: str | None = None
    incident_number: str | None = Field(default=None, alias="incidentNumber")
    last_alert_id: str | None = Field(default=None, alias="lastAlertId")
    last_alert_time: datetime | None = Field(default=None, alias="lastAlertTime")
    service: str | None = None
    start_time: datetime | None = Field(default=None, alias="startTime")
    paged_teams: list[str] | None = Field(default=None, alias="pagedTeams")
    paged_users: list[str] | None = Field(default=None, alias="pagedUsers")
    paged_policies: list[PagedPolicy] | None = Field(default=None, alias="pagedPolicies")
    transitions: list[Transition] | None = None


class IncidentResponse(ApiModel):
    incidents: list[Incident] | None = None


# Users and teams


class User(ApiModel):
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    username: str | None = None
    email: str | None = None
    admin: bool | None = None
    expiration_hours: int | None = Field(default=None, alias="expirationHours")
    created_at: str | None = Field(default=None, alias="createdAt")
    password_last_updated: str | None = Field(default=None, alias="passwordLastUpdated")
    verified: bool | None = None


class UserList(ApiModel):
    # v1 nests every user inside its own list; kept as-is for wire compatibility.
    users: list[list[User]]


class UserListV2(ApiModel):
    users: list[User]


class Team(ApiModel):
    name: str | None = None
    slug: str | None = None
    member_count: int | None = Field(default=None, alias="memberCount")
    version: int | None = None
    is_default_team: bool | None = Field(default=None, alias="isDefaultTeam")


class TeamMembers(ApiModel):
    members: list[User] | None = None


class Admin(ApiModel):
    username: str | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    self_url: str | None = Field(default=None, alias="_selfUrl")


class TeamAdmins(ApiModel):
    admin: list[Admin] | None = None


# Contact methods


class ContactType(Enum):
    PHONE = "phone"
    EMAIL = "email"
    DEVICE = "device"

    @property
    def endpoint_noun(self) -> str:
        return _ENDPOINT_NOUNS[self]

    @classmethod
    def from_notification_type(cls, notification_type: str) -> ContactType | None:
        return _NOTIFICATION_TYPES.get(notification_type)


_ENDPOINT_NOUNS = {
    ContactType.PHONE: "phones",
    ContactType.EMAIL: "emails",
    ContactType.DEVICE: "devices",
}

_NOTIFICATION_TYPES = {
    "push": ContactType.DEVICE,
    "email": ContactType.EMAIL,
    "phone": ContactType.PHONE,
    "sms": ContactType.PHONE,
}


class Contact(ApiModel):
    phone_number: str | None = Field(default=None, alias="phone")
    email: str | None = None
    label: str | None = None
    rank: int | None = None
    ext_id: str | None = Field(default=None, alias="extId")
    id: int | None = None
    value: str | None = None
    verified: str | None = None

    def contact_type(self) -> ContactType | None:
        """Classify the contact by its populated fields.

        A phone number wins over an email address. ``None`` means the type cannot be
        determined, which makes the contact unusable for creation.
        """
        if self.phone_number is not None:
            return ContactType.PHONE
        if self.email is not None:
            return ContactType.EMAIL
        return None


class ContactGroup(ApiModel):
    contact_methods: list[Contact] = Field(alias="contactMethods")


class AllContactResponse(ApiModel):
    phones: ContactGroup | None = None
    emails: ContactGroup | None = None
    devices: ContactGroup | None = None


class GetAllContactResponse(ApiModel):
    contact_methods: list[Contact] | None = Field(default=None, alias="contactMethods")


class EmailsResponse(ApiModel):
    contact_methods: list[Any] = Field(alias="contactMethods")


# On-call schedules


class ApiTeam(ApiModel):
    name: str | None = None
    slug: str | None = None


class ApiEscalationPolicy(ApiModel):
    name: str | None = None
    slug: str | None = None


class ApiUser(ApiModel):
    username: str | None = None


class ApiOnCallOverride(ApiModel):
    orig_on_call_user: ApiUser | None = Field(default=None, alias="origOnCallUser")
    override_on_call_user: ApiUser | None = Field(default=None, alias="overrideOnCallUser")
    start: datetime | None = None
    end: datetime | None = None
    policy: ApiEscalationPolicy | None = None


class ApiOnCallRoll(ApiModel):
    start: datetime | None = None
    end: datetime | None = None
    on_call_user: ApiUser | None = Field(default=None, alias="onCallUser")
    is_roll: bool | None = Field(default=None, alias="isRoll")


class ApiOnCallEntry(ApiModel):
    on_call_user: ApiUser | None = Field(default=None, alias="onCallUser")
    override_on_call_user: ApiUser | None = Field(default=None, alias="overrideOnCallUser")
    on_call_type: str | None = Field(default=None, alias="onCallType")
    rotation_name: str | None = Field(default=None, alias="rotationName")
    shift_name: str | None = Field(default=None, alias="shiftName")
    shift_roll: datetime | None = Field(default=None, alias="shiftRoll")
    rolls: list[ApiOnCallRoll] | None = None


class ApiEscalationPolicySchedule(ApiModel):
    policy: ApiEscalationPolicy | None = None
    schedule: list[ApiOnCallEntry] | None = None
    overrides: list[ApiOnCallOverride] | None = None


class ApiTeamSchedule(ApiModel):
    team: ApiTeam | None = None
    schedules: list[ApiEscalationPolicySchedule] | None = None


class ApiUserSchedule(ApiModel):
    schedules: list[ApiTeamSchedule] | None = Field(default=None, alias="teamSchedules")


class TakeRequest(ApiModel):
    from_user: str | None = Field(default=None, alias="fromUser")
    to_user: str | None = Field(default=None, alias="toUser")


class TakeResponse(ApiModel):
    result: str | None = None


# Escalation policies


class EscalationPolicyStepEntry(ApiModel):
    execution_type: str | None = Field(default=None, alias="executionType")
    user: dict[str, str] | None = None
    rotation_group: dict[str, str] | None = Field(default=None, alias="rotationGroup")
    webhook: dict[str, str] | None = None
    email: dict[str, str] | None = None
    target_policy: dict[str, str] | None = Field(default=None, alias="targetPolicy")


class EscalationPolicySteps(ApiModel):
    timeout: int
    entries: list[EscalationPolicyStepEntry]


class EscalationPolicy(ApiModel):
    name: str
    team_id: str = Field(alias="teamSlug")
    ignore_custom_paging_policies: bool = Field(alias="ignoreCustomPagingPolicies")
    steps: list[EscalationPolicySteps]
    id: str = Field(alias="slug")


class EscalationPolicyListDetail(ApiModel):
    name: str
    slug: str


class EscalationPolicyListElement(ApiModel):
    policy: EscalationPolicyListDetail
    team: EscalationPolicyListDetail


class EscalationPolicyList(ApiModel):
    policies: list[EscalationPolicyListElement]


# Routing keys


class RoutingKey(ApiModel):
    routing_key: str | None = Field(default=None, alias="routingKey")
    targets: list[str] | None = None


class RoutingKeyResponseTargets(ApiModel):
    policy_slug: str | None = Field(default=None, alias="policySlug")


class RoutingKeyResponse(ApiModel):
    routing_key: str | None = Field(default=None, alias="routingKey")
    targets: list[RoutingKeyResponseTargets] | None = None


class RoutingKeyResponseList(ApiModel):
    routing_keys: list[RoutingKeyResponse] | None = Field(default=None, alias="routingKeys")


# Wire helpers


def _adapter_for(model_type: Any) -> TypeAdapter[Any]:
    try:
        adapter = _adapter_cache.get(model_type)
    except TypeError:
        return TypeAdapter(model_type)

    if adapter is None:
        adapter = TypeAdapter(model_type)
        _adapter_cache[model_type] = adapter
    return adapter


def to_wire(payload: BaseModel) -> dict[str, Any]:
    """Render a model as the JSON object the API expects."""
    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode_payload(model_type: type[T] | Any, details: RequestDetails) -> T:
    """Parse the response body of ``details`` into ``model_type``."""
    try:
        return _adapter_for(model_type).validate_json(details.response_body)
    except ValidationError as error:
        raise EncodingError(str(error)) from error
