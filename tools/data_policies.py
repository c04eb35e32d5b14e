"""Data security policy metadata."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-data-policy-metadata", "GET", "/data-policies/metadata",
             "Get data policy metadata for the workspace"),
    Endpoint("get-data-policy-spaces", "GET", "/data-policies/spaces", "Get spaces with data policies",
             params=("ids", "keys", "sort", "cursor", "limit")),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
