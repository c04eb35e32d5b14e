"""Smart Links in the content tree (the /embeds endpoints)."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("create-smart-link", "POST", "/embeds", "Create Smart Link in the content tree"),
    Endpoint("get-smart-link-by-id", "GET", "/embeds/{id}", "Get Smart Link in the content tree by id",
             params=(
                 "include-collaborators", "include-direct-children", "include-operations",
                 "include-properties",
             )),
    Endpoint("delete-smart-link", "DELETE", "/embeds/{id}", "Delete Smart Link in the content tree"),
    Endpoint("get-smart-link-content-properties", "GET", "/embeds/{id}/properties",
             "Get content properties for Smart Link in the content tree",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-smart-link-property", "POST", "/embeds/{id}/properties",
             "Create content property for Smart Link in the content tree"),
    Endpoint("get-smart-link-content-properties-by-id", "GET", "/embeds/{embed-id}/properties/{property-id}",
             "Get content property for Smart Link in the content tree by id"),
    Endpoint("update-smart-link-property-by-id", "PUT", "/embeds/{embed-id}/properties/{property-id}",
             "Update content property for Smart Link in the content tree by id"),
    Endpoint("delete-smart-link-property-by-id", "DELETE", "/embeds/{embed-id}/properties/{property-id}",
             "Delete content property for Smart Link in the content tree by id"),
    Endpoint("get-smart-link-operations", "GET", "/embeds/{id}/operations",
             "Get permitted operations for a Smart Link in the content tree"),
    Endpoint("get-smart-link-direct-children", "GET", "/embeds/{id}/direct-children",
             "Get direct children of a Smart Link",
             params=("cursor", "limit", "sort")),
    Endpoint("get-smart-link-descendants", "GET", "/embeds/{id}/descendants",
             "Get descendants of a smart link",
             params=("limit", "depth", "cursor")),
    Endpoint("get-smart-link-ancestors", "GET", "/embeds/{id}/ancestors",
             "Get all ancestors of Smart Link in content tree",
             params=("limit",)),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
