"""Attachments and their labels, operations, content properties, versions and footer comments."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-attachments", "GET", "/attachments", "Get attachments",
             params=("sort", "cursor", "status", "mediaType", "filename", "limit")),
    Endpoint("get-attachment-by-id", "GET", "/attachments/{id}", "Get attachment by id",
             params=(
                 "version", "include-labels", "include-properties", "include-operations",
                 "include-versions", "include-version", "include-collaborators",
             )),
    Endpoint("delete-attachment", "DELETE", "/attachments/{id}", "Delete attachment",
             params=("purge",)),
    Endpoint("get-attachment-labels", "GET", "/attachments/{id}/labels", "Get labels for attachment",
             params=("prefix", "sort", "cursor", "limit")),
    Endpoint("get-attachment-operations", "GET", "/attachments/{id}/operations",
             "Get permitted operations for attachment"),
    Endpoint("get-attachment-content-properties", "GET", "/attachments/{attachment-id}/properties",
             "Get content properties for attachment",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-attachment-property", "POST", "/attachments/{attachment-id}/properties",
             "Create content property for attachment"),
    Endpoint("get-attachment-content-properties-by-id", "GET", "/attachments/{attachment-id}/properties/{property-id}",
             "Get content property for attachment by id"),
    Endpoint("update-attachment-property-by-id", "PUT", "/attachments/{attachment-id}/properties/{property-id}",
             "Update content property for attachment by id"),
    Endpoint("delete-attachment-property-by-id", "DELETE", "/attachments/{attachment-id}/properties/{property-id}",
             "Delete content property for attachment by id"),
    Endpoint("get-attachment-versions", "GET", "/attachments/{id}/versions", "Get attachment versions",
             params=("cursor", "limit", "sort")),
    Endpoint("get-attachment-version-details", "GET", "/attachments/{attachment-id}/versions/{version-number}",
             "Get version details for attachment version"),
    Endpoint("get-attachment-comments", "GET", "/attachments/{id}/footer-comments", "Get attachment comments",
             params=("body-format", "cursor", "limit", "sort", "version")),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
