"""Resource APIs for the asynchronous client.

Every operation returns the decoded payload together with the ``RequestDetails`` of
the exchange, or just the ``RequestDetails`` when the API answers without a payload.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from . import paths
from .api import require_contact_type, require_team_name, require_username
from .errors import NotFoundError
from .lookups import (
    all_devices_contact,
    contains_member,
    find_contact_by_id,
    find_default_email_contact_id,
    find_routing_key,
    is_all_devices,
)
from .models import (
    AllContactResponse,
    ApiTeamSchedule,
    ApiUserSchedule,
    Contact,
    ContactType,
    EmailsResponse,
    EscalationPolicy,
    EscalationPolicyList,
    GetAllContactResponse,
    Incident,
    IncidentResponse,
    RequestDetails,
    RoutingKey,
    RoutingKeyResponse,
    RoutingKeyResponseList,
    TakeRequest,
    TakeResponse,
    Team,
    TeamAdmins,
    TeamMembers,
    User,
    UserList,
    UserListV2,
    decode_payload,
    to_wire,
)

AsyncRequestFn = Callable[..., Awaitable[RequestDetails]]

logger = logging.getLogger(__name__)


class AsyncIncidentsApi:
    def __init__(self, request: AsyncRequestFn) -> None:
        self._request = request

    async def get(self, incident_id: int) -> tuple[Incident, RequestDetails]:
        details = await self._request("incidents.get", "GET", paths.incident_path(incident_id))
        return decode_payload(Incident, details), details

    async def list(self) -> tuple[IncidentResponse, RequestDetails]:
        details = await self._request("incidents.list", "GET", "v1/incidents")
        return decode_payload(IncidentResponse, details), details


class AsyncUsersApi:
    def __init__(self, request: AsyncRequestFn) -> None:
        self._request = request

    async def create(self, user: User) -> tuple[User, RequestDetails]:
        details = await self._request("users.create", "POST", "v1/user", json_body=to_wire(user))
        return decode_payload(User, details), details

    async def get(self, username: str) -> tuple[User, RequestDetails]:
        details = await self._request("users.get", "GET", paths.user_path(username))
        return decode_payload(User, details), details

    async def delete(self, username: str, replacement: str) -> RequestDetails:
        return await self._request(
            "users.delete",
            "DELETE",
            paths.user_path(username),
            json_body={"replacement": replacement},
        )

    async def list(self) -> tuple[UserList, RequestDetails]:
        """List users through the v1 endpoint, which nests each user in its own list."""
        details = await self._request("users.list", "GET", "v1/user")
        return decode_payload(UserList, details), details

    async def list_v2(self) -> tuple[UserListV2, RequestDetails]:
        details = await self._request("users.list_v2", "GET", "v2/user")
        return decode_payload(UserListV2, details), details

    async def get_by_email(self, email: str) -> tuple[UserListV2, RequestDetails]:
        details = await self._request("users.get_by_email", "GET", "v2/user", query={"email": email})
        return decode_payload(UserListV2, details), details

    async def update(self, user: User) -> tuple[User, RequestDetails]:
        username = require_username(user)
        details = await self._request("users.update", "PUT", paths.user_path(username), json_body=to_wire(user))
        return decode_payload(User, details), details

    async def default_email_contact_id(self, username: str) -> tuple[int | float, RequestDetails]:
        """Return the id of the email contact method labelled ``Default``.

        Raises ``NotFoundError`` when the user has no such contact method.
        """
        details = await self._request(
            "users.default_email_contact_id",
            "GET",
            paths.contact_methods_path(username, ContactType.EMAIL),
        )
        contact_id = find_default_email_contact_id(decode_payload(EmailsResponse, details))
        if contact_id is None:
            logger.debug("no default email contact for %s", username)
            raise NotFoundError()
        return contact_id, details


class AsyncTeamsApi:
    def __init__(self, request: AsyncRequestFn) -> None:
        self._request = request

    async def create(self, team: Team) -> tuple[Team, RequestDetails]:
        details = await self._request("teams.create", "POST", "v1/team", json_body=to_wire(team))
        return decode_payload(Team, details), details

    async def get(self, team_id: str) -> tuple[Team, RequestDetails]:
        details = await self._request("teams.get", "GET", paths.team_path(team_id))
        return decode_payload(Team, details), details

    async def list(self) -> tuple[list[Team], RequestDetails]:
        details = await self._request("teams.list", "GET", "v1/team")
        return decode_payload(list[Team], details), details

    async def members(self, team_id: str) -> tuple[TeamMembers, RequestDetails]:
        details = await self._request("teams.members", "GET", f"{paths.team_path(team_id)}/members")
        return decode_payload(TeamMembers, details), details

    async def delete(self, team_id: str) -> RequestDetails:
        return await self._request("teams.delete", "DELETE", paths.team_path(team_id))

    async def update(self, team: Team) -> tuple[Team, RequestDetails]:
        name = require_team_name(team)
        details = await self._request("teams.update", "PUT", paths.team_path(name), json_body=to_wire(team))
        return decode_payload(Team, details), details

    async def add_member(self, team_id: str, username: str) -> RequestDetails:
        return await self._request(
            "teams.add_member",
            "POST",
            f"{paths.team_path(team_id)}/members",
            json_body={"username": username},
        )

    async def remove_member(self, team_id: str, username: str, replacement: str) -> RequestDetails:
        return await self._request(
            "teams.remove_member",
            "DELETE",
            paths.team_member_path(team_id, username),
            json_body={"replacement": replacement},
        )

    async def is_member(self, team_id: str, username: str) -> tuple[bool, RequestDetails]:
        """Check membership by username, ignoring case."""
        members, details = await self.members(team_id)
        return contains_member(members.members, username), details

    async def admins(self, team_id: str) -> tuple[TeamAdmins, RequestDetails]:
        details = await self._request("teams.admins", "GET", f"{paths.team_path(team_id)}/admins")
        return decode_payload(TeamAdmins, details), details


class AsyncOnCallApi:
    def __init__(self, request: AsyncRequestFn) -> None:
        self._request = request

    async def team_schedule(
        self,
        team_slug: str,
        *,
        days_forward: int,
        days_skip: int = 0,
        step: int = 0,
    ) -> tuple[ApiTeamSchedule, RequestDetails]:
        details = await self._request(
            "oncall.team_schedule",
            "GET",
            paths.team_schedule_path(team_slug),
            query=paths.schedule_query(days_forward, days_skip, step),
        )
        return decode_payload(ApiTeamSchedule, details), details

    async def user_schedule(
        self,
        username: str,
        *,
        days_forward: int,
        days_skip: int = 0,
        step: int = 0,
    ) -> tuple[ApiUserSchedule, RequestDetails]:
        details = await self._request(
            "oncall.user_schedule",
            "GET",
            paths.user_schedule_path(username),
            query=paths.schedule_query(days_forward, days_skip, step),
        )
        return decode_payload(ApiUserSchedule, details), details

    async def take_for_team(self, team_slug: str, request: TakeRequest) -> tuple[TakeResponse, RequestDetails]:
        details = await self._request(
            "oncall.take_for_team",
            "PATCH",
            f"{paths.team_path(team_slug)}/oncall/user",
            json_body=to_wire(request),
        )
        return decode_payload(TakeResponse, details), details

    async def take_for_policy(self, policy_slug: str, request: TakeRequest) -> tuple[TakeResponse, RequestDetails]:
        details = await self._request(
            "oncall.take_for_policy",
            "PATCH",
            f"{paths.policy_path(policy_slug)}/oncall/user",
            json_body=to_wire(request),
        )
        return decode_payload(TakeResponse, details), details


class AsyncEscalationPoliciesApi:
    def __init__(self, request: AsyncRequestFn) -> None:
        self._request = request

    async def create(self, policy: EscalationPolicy) -> tuple[EscalationPolicy, RequestDetails]:
        details = await self._request("policies.create", "POST", "v1/policies", json_body=to_wire(policy))
        return decode_payload(EscalationPolicy, details), details

    async def list(self) -> tuple[EscalationPolicyList, RequestDetails]:
        details = await self._request("policies.list", "GET", "v1/policies")
        return decode_payload(EscalationPolicyList, details), details

    async def get(self, policy_id: str) -> tuple[EscalationPolicy, RequestDetails]:
        details = await self._request("policies.get", "GET", paths.policy_path(policy_id))
        return decode_payload(EscalationPolicy, details), details

    async def delete(self, policy_id: str) -> RequestDetails:
        return await self._request("policies.delete", "DELETE", paths.policy_path(policy_id))


class AsyncRoutingKeysApi:
    def __init__(self, request: AsyncRequestFn) -> None:
        self._request = request

    async def create(self, routing_key: RoutingKey) -> tuple[RoutingKey, RequestDetails]:
        details = await self._request(
            "routing_keys.create",
            "POST",
            "v1/org/routing-keys",
            json_body=to_wire(routing_key),
        )
        return decode_payload(RoutingKey, details), details

    async def list(self) -> tuple[RoutingKeyResponseList, RequestDetails]:
        details = await self._request("routing_keys.list", "GET", "v1/org/routing-keys")
        return decode_payload(RoutingKeyResponseList, details), details

    async def get(self, key_name: str) -> tuple[RoutingKeyResponse | None, RequestDetails]:
        """Find a routing key by exact name; ``None`` when nothing matches."""
        keys, details = await self.list()
        return find_routing_key(keys.routing_keys, key_name), details


class AsyncContactsApi:
    def __init__(self, request: AsyncRequestFn) -> None:
        self._request = request

    async def create(self, username: str, contact: Contact) -> tuple[Contact, RequestDetails]:
        contact_type = require_contact_type(contact)
        details = await self._request(
            "contacts.create",
            "POST",
            paths.contact_methods_path(username, contact_type),
            json_body=to_wire(contact),
        )
        return decode_payload(Contact, details), details

    async def get(self, username: str, ext_id: str, contact_type: ContactType) -> tuple[Contact, RequestDetails]:
        details = await self._request("contacts.get", "GET", paths.contact_method_path(username, contact_type, ext_id))
        return decode_payload(Contact, details), details

    async def list(self, username: str) -> tuple[AllContactResponse, RequestDetails]:
        details = await self._request("contacts.list", "GET", paths.contact_methods_path(username))
        return decode_payload(AllContactResponse, details), details

    async def delete(self, username: str, ext_id: str, contact_type: ContactType) -> RequestDetails:
        return await self._request(
            "contacts.delete",
            "DELETE",
            paths.contact_method_path(username, contact_type, ext_id),
        )

    async def get_by_id(
        self,
        username: str,
        contact_id: int,
        contact_type: ContactType,
    ) -> tuple[Contact | None, RequestDetails]:
        # Device 0 is the virtual "All Devices" contact and is never fetched.
        if is_all_devices(contact_id, contact_type):
            return all_devices_contact()

        details = await self._request(
            "contacts.get_by_id",
            "GET",
            paths.contact_methods_path(username, contact_type),
        )
        contacts = decode_payload(GetAllContactResponse, details)
        return find_contact_by_id(contacts.contact_methods, contact_id), details
