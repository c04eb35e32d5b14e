"""Forge app properties (key/value storage owned by the calling app)."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("put-forge-app-property", "PUT", "/app/properties/{propertyKey}",
             "Create or update a Forge app property."),
    Endpoint("delete-forge-app-property", "DELETE", "/app/properties/{propertyKey}",
             "Deletes a Forge app property."),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
