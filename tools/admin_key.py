"""Admin key: lets site admins act with admin privileges for a limited time."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-admin-key", "GET", "/admin-key", "Get Admin Key"),
    Endpoint("enable-admin-key", "POST", "/admin-key", "Enable Admin Key"),
    Endpoint("disable-admin-key", "DELETE", "/admin-key", "Disable Admin Key"),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
