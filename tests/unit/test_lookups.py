from __future__ import annotations

import pytest

from victorops.lookups import (
    ALL_DEVICES,
    all_devices_contact,
    contains_member,
    find_contact_by_id,
    find_default_email_contact_id,
    find_routing_key,
    is_all_devices,
)
from victorops.models import Contact, ContactType, EmailsResponse, RoutingKeyResponse, User


def test_all_devices_contact_is_synthetic() -> None:
    contact, details = all_devices_contact()

    assert contact.label == ALL_DEVICES
    assert contact.value == ALL_DEVICES
    assert contact.id == 0
    assert contact.rank == 0
    assert (details.status_code, details.response_body, details.request_body) == (200, "", "")


@pytest.mark.parametrize(
    ("contact_id", "contact_type", "expected"),
    [
        (0, ContactType.DEVICE, True),
        (1, ContactType.DEVICE, False),
        (0, ContactType.PHONE, False),
        (0, ContactType.EMAIL, False),
    ],
)
def test_is_all_devices(contact_id: int, contact_type: ContactType, expected: bool) -> None:
    assert is_all_devices(contact_id, contact_type) is expected


def test_default_email_takes_first_numeric_match() -> None:
    emails = EmailsResponse(
        contact_methods=[
            {"label": "Work", "id": 1},
            {"label": "Default", "id": "not-a-number"},
            {"label": "Default", "id": True},
            {"label": "Default", "id": 7},
            {"label": "Default", "id": 9},
        ]
    )

    assert find_default_email_contact_id(emails) == 7


def test_default_email_label_is_case_sensitive() -> None:
    emails = EmailsResponse(contact_methods=[{"label": "default", "id": 3}, {"id": 4}])

    assert find_default_email_contact_id(emails) is None


def test_contains_member_ignores_case_and_missing_usernames() -> None:
    members = [User(first_name="No Name"), User(username="TestUser")]

    assert contains_member(members, "testuser")
    assert not contains_member(members, "other")
    assert not contains_member(None, "testuser")
    assert not contains_member([], "testuser")


def test_find_routing_key_is_exact() -> None:
    keys = [RoutingKeyResponse(), RoutingKeyResponse(routing_key="Database"), RoutingKeyResponse(routing_key="database")]

    assert find_routing_key(keys, "database") is keys[2]
    assert find_routing_key(keys, "data") is None
    assert find_routing_key(None, "database") is None


def test_find_contact_by_id() -> None:
    contacts = [Contact(label="no id"), Contact(id=3, label="three"), Contact(id=3, label="duplicate")]

    found = find_contact_by_id(contacts, 3)
    assert found is not None and found.label == "three"
    assert find_contact_by_id(contacts, 4) is None
    assert find_contact_by_id(None, 3) is None


def test_default_email_skips_entries_that_are_not_objects() -> None:
    emails = EmailsResponse(contact_methods=[None, "Default", 5, {"label": "Default", "id": 11}])

    assert find_default_email_contact_id(emails) == 11
