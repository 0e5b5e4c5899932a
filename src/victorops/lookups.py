"""Pure lookups applied to listings fetched from the API.

Each function takes an already decoded collection and never touches the network, so
the sync and async API layers share them.
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Contact, ContactType, EmailsResponse, RequestDetails, RoutingKeyResponse, User

DEFAULT_EMAIL_LABEL = "Default"
ALL_DEVICES = "All Devices"


def all_devices_contact() -> tuple[Contact, RequestDetails]:
    """The virtual "All Devices" contact with device id 0.

    The API never returns it; it is a sentinel callers use to page every device of a
    user, so it is built locally along with a synthetic successful exchange.
    """
    contact = Contact(label=ALL_DEVICES, rank=0, id=0, value=ALL_DEVICES)
    return contact, RequestDetails(status_code=200, response_body="", request_body="")


def is_all_devices(contact_id: int, contact_type: ContactType) -> bool:
    return contact_type is ContactType.DEVICE and contact_id == 0


def find_default_email_contact_id(emails: EmailsResponse) -> int | float | None:
    for entry in emails.contact_methods:
        if not isinstance(entry, dict) or entry.get("label") != DEFAULT_EMAIL_LABEL:
            continue
        contact_id = entry.get("id")
        if isinstance(contact_id, (int, float)) and not isinstance(contact_id, bool):
            return contact_id
    return None


def contains_member(members: Iterable[User] | None, username: str) -> bool:
    wanted = username.lower()
    for member in members or ():
        if member.username is not None and member.username.lower() == wanted:
            return True
    return False


def find_routing_key(keys: Iterable[RoutingKeyResponse] | None, key_name: str) -> RoutingKeyResponse | None:
    for key in keys or ():
        if key.routing_key is not None and key.routing_key == key_name:
            return key
    return None


def find_contact_by_id(contacts: Iterable[Contact] | None, contact_id: int) -> Contact | None:
    for contact in contacts or ():
        if contact.id is not None and contact.id == contact_id:
            return contact
    return None
