"""Bulk user lookup and email based site access checks and invitations."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("create-bulk-user-lookup", "POST", "/users-bulk", "Create bulk user lookup using ids"),
    Endpoint("check-access-by-email", "POST", "/user/access/check-access-by-email",
             "Check site access for a list of emails"),
    Endpoint("invite-by-email", "POST", "/user/access/invite-by-email",
             "Invite a list of emails to the site"),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
