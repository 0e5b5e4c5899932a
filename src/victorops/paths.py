"""Path templates for the public API."""

from __future__ import annotations

from urllib.parse import quote_plus

from .models import ContactType


def encode_segment(value: str | int) -> str:
    """Form-urlencode a value for use as a single path segment."""
    return quote_plus(str(value), safe="")


def incident_path(incident_id: int) -> str:
    return f"v1/incidents/{encode_segment(incident_id)}"


def user_path(username: str) -> str:
    return f"v1/user/{encode_segment(username)}"


def team_path(team_id: str) -> str:
    return f"v1/team/{encode_segment(team_id)}"


def team_member_path(team_id: str, username: str) -> str:
    return f"{team_path(team_id)}/members/{encode_segment(username)}"


def policy_path(policy_id: str) -> str:
    return f"v1/policies/{encode_segment(policy_id)}"


def team_schedule_path(team_slug: str) -> str:
    return f"v2/team/{encode_segment(team_slug)}/oncall/schedule"


def user_schedule_path(username: str) -> str:
    return f"v2/user/{encode_segment(username)}/oncall/schedule"


def contact_methods_path(username: str, contact_type: ContactType | None = None) -> str:
    path = f"{user_path(username)}/contact-methods"
    if contact_type is None:
        return path
    return f"{path}/{contact_type.endpoint_noun}"


def contact_method_path(username: str, contact_type: ContactType, ext_id: str) -> str:
    return f"{contact_methods_path(username, contact_type)}/{encode_segment(ext_id)}"


def schedule_query(days_forward: int, days_skip: int, step: int) -> dict[str, int]:
    return {"daysForward": days_forward, "daysSkip": days_skip, "step": step}
