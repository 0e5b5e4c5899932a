from __future__ import annotations

import pytest

from victorops.errors import EncodingError
from victorops.models import (
    ApiUserSchedule,
    Contact,
    ContactType,
    EscalationPolicy,
    Incident,
    RequestDetails,
    TakeRequest,
    User,
    UserList,
    decode_payload,
    to_wire,
)


def _details(body: str) -> RequestDetails:
    return RequestDetails(status_code=200, response_body=body, request_body="{}")


@pytest.mark.parametrize(
    ("contact", "expected"),
    [
        (Contact(phone_number="555-1234"), ContactType.PHONE),
        (Contact(email="a@b.c"), ContactType.EMAIL),
        (Contact(phone_number="555-1234", email="a@b.c"), ContactType.PHONE),
        (Contact(label="Pager"), None),
    ],
)
def test_contact_type_prefers_phone(contact: Contact, expected: ContactType | None) -> None:
    assert contact.contact_type() is expected


def test_contact_type_names() -> None:
    assert [t.endpoint_noun for t in ContactType] == ["phones", "emails", "devices"]
    assert ContactType.from_notification_type("push") is ContactType.DEVICE
    assert ContactType.from_notification_type("email") is ContactType.EMAIL
    assert ContactType.from_notification_type("sms") is ContactType.PHONE
    assert ContactType.from_notification_type("pigeon") is None


def test_absent_fields_decode_to_none() -> None:
    incident = decode_payload(Incident, _details('{"entityId": "e-1"}'))

    assert incident.entity_id == "e-1"
    assert incident.alert_count is None
    assert incident.paged_teams is None


def test_to_wire_uses_api_names_and_skips_unset() -> None:
    user = User(first_name="Jane", username="jdoe", admin=False)

    assert to_wire(user) == {"firstName": "Jane", "username": "jdoe", "admin": False}
    assert to_wire(TakeRequest(from_user="a", to_user="b")) == {"fromUser": "a", "toUser": "b"}
    assert to_wire(Contact(phone_number="555")) == {"phone": "555"}


def test_escalation_policy_wire_names() -> None:
    policy = EscalationPolicy(
        name="Primary",
        team_id="team-1",
        ignore_custom_paging_policies=True,
        steps=[{"timeout": 5, "entries": [{"executionType": "user", "user": {"username": "jdoe"}}]}],
        id="pol-1",
    )

    wire = to_wire(policy)
    assert wire["teamSlug"] == "team-1"
    assert wire["slug"] == "pol-1"
    assert wire["ignoreCustomPagingPolicies"] is True
    assert wire["steps"][0]["entries"][0] == {"executionType": "user", "user": {"username": "jdoe"}}


def test_v1_user_list_keeps_nesting() -> None:
    users = decode_payload(UserList, _details('{"users": [[{"username": "a"}], [{"username": "b"}]]}'))

    assert [group[0].username for group in users.users] == ["a", "b"]


def test_user_schedule_reads_team_schedules_key() -> None:
    schedule = decode_payload(
        ApiUserSchedule,
        _details('{"teamSchedules": [{"team": {"name": "Ops", "slug": "ops"}, "schedules": []}]}'),
    )

    assert schedule.schedules is not None
    assert schedule.schedules[0].team is not None
    assert schedule.schedules[0].team.slug == "ops"


@pytest.mark.parametrize("body", ["", "not json", '{"alertCount": "many"}'])
def test_undecodable_body_is_encoding_error(body: str) -> None:
    with pytest.raises(EncodingError) as error:
        decode_payload(Incident, _details(body))

    assert str(error.value).startswith("JSON serialization/deserialization failed: ")


def test_missing_required_field_is_encoding_error() -> None:
    with pytest.raises(EncodingError):
        decode_payload(EscalationPolicy, _details('{"name": "Primary"}'))
