"""Custom content (content types defined by Connect/Forge apps)."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-custom-content-by-type", "GET", "/custom-content", "Get custom content by type",
             required=("type",),
             params=("id", "space-id", "sort", "cursor", "limit", "body-format")),
    Endpoint("create-custom-content", "POST", "/custom-content", "Create custom content"),
    Endpoint("get-custom-content-by-id", "GET", "/custom-content/{id}", "Get custom content by id",
             params=(
                 "body-format", "version", "include-labels", "include-properties",
                 "include-operations", "include-versions", "include-version",
                 "include-collaborators",
             )),
    Endpoint("update-custom-content", "PUT", "/custom-content/{id}", "Update custom content"),
    Endpoint("delete-custom-content", "DELETE", "/custom-content/{id}", "Delete custom content",
             params=("purge",)),
    Endpoint("get-custom-content-attachments", "GET", "/custom-content/{id}/attachments",
             "Get attachments for custom content",
             params=("sort", "cursor", "status", "mediaType", "filename", "limit")),
    Endpoint("get-custom-content-comments", "GET", "/custom-content/{id}/footer-comments",
             "Get custom content comments",
             params=("body-format", "cursor", "limit", "sort")),
    Endpoint("get-custom-content-labels", "GET", "/custom-content/{id}/labels",
             "Get labels for custom content",
             params=("prefix", "sort", "cursor", "limit")),
    Endpoint("get-custom-content-operations", "GET", "/custom-content/{id}/operations",
             "Get permitted operations for custom content"),
    Endpoint("get-custom-content-content-properties", "GET", "/custom-content/{custom-content-id}/properties",
             "Get content properties for custom content",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-custom-content-property", "POST", "/custom-content/{custom-content-id}/properties",
             "Create content property for custom content"),
    Endpoint("get-custom-content-content-properties-by-id", "GET", "/custom-content/{custom-content-id}/properties/{property-id}",
             "Get content property for custom content by id"),
    Endpoint("update-custom-content-property-by-id", "PUT", "/custom-content/{custom-content-id}/properties/{property-id}",
             "Update content property for custom content by id"),
    Endpoint("delete-custom-content-property-by-id", "DELETE", "/custom-content/{custom-content-id}/properties/{property-id}",
             "Delete content property for custom content by id"),
    Endpoint("get-custom-content-versions", "GET", "/custom-content/{custom-content-id}/versions",
             "Get custom content versions",
             params=("body-format", "cursor", "limit", "sort")),
    Endpoint("get-custom-content-version-details", "GET", "/custom-content/{custom-content-id}/versions/{version-number}",
             "Get version details for custom content version"),
    Endpoint("get-child-custom-content", "GET", "/custom-content/{id}/children", "Get child custom content",
             params=("cursor", "limit", "sort")),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
