"""Spaces, space properties, permissions and roles."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-spaces", "GET", "/spaces", "Get spaces",
             params=(
                 "ids", "keys", "type", "status", "labels", "favorited-by", "not-favorited-by",
                 "sort", "description-format", "include-icon", "cursor", "limit",
             )),
    Endpoint("create-space", "POST", "/spaces", "Create space"),
    Endpoint("get-space-by-id", "GET", "/spaces/{id}", "Get space by id",
             params=(
                 "description-format", "include-icon", "include-operations", "include-properties",
                 "include-permissions", "include-role-assignments", "include-labels",
             )),
    Endpoint("get-blog-posts-in-space", "GET", "/spaces/{id}/blogposts", "Get blog posts in space",
             params=("sort", "status", "title", "body-format", "cursor", "limit")),
    Endpoint("get-space-labels", "GET", "/spaces/{id}/labels", "Get labels for space",
             params=("prefix", "sort", "cursor", "limit")),
    Endpoint("get-space-content-labels", "GET", "/spaces/{id}/content/labels", "Get labels for space content",
             params=("prefix", "sort", "cursor", "limit")),
    Endpoint("get-custom-content-by-type-in-space", "GET", "/spaces/{id}/custom-content",
             "Get custom content by type in space",
             required=("type",),
             params=("cursor", "limit", "body-format")),
    Endpoint("get-space-operations", "GET", "/spaces/{id}/operations", "Get permitted operations for space"),
    Endpoint("get-pages-in-space", "GET", "/spaces/{id}/pages", "Get pages in space",
             params=("depth", "sort", "status", "title", "body-format", "cursor", "limit")),
    Endpoint("get-space-properties", "GET", "/spaces/{space-id}/properties", "Get space properties in space",
             params=("key", "cursor", "limit")),
    Endpoint("create-space-property", "POST", "/spaces/{space-id}/properties",
             "Create space property in space"),
    Endpoint("get-space-property-by-id", "GET", "/spaces/{space-id}/properties/{property-id}",
             "Get space property by id"),
    Endpoint("update-space-property-by-id", "PUT", "/spaces/{space-id}/properties/{property-id}",
             "Update space property by id"),
    Endpoint("delete-space-property-by-id", "DELETE", "/spaces/{space-id}/properties/{property-id}",
             "Delete space property by id"),
    Endpoint("get-space-permissions-assignments", "GET", "/spaces/{id}/permissions",
             "Get space permissions assignments",
             params=("cursor", "limit")),
    Endpoint("get-available-space-permissions", "GET", "/space-permissions",
             "Get available space permissions",
             params=("cursor", "limit")),
    Endpoint("get-available-space-roles", "GET", "/space-roles", "Get available space roles",
             params=("space-id", "role-type", "principal-id", "principal-type", "cursor", "limit")),
    Endpoint("get-space-roles-by-id", "GET", "/space-roles/{id}", "Get space role by ID"),
    Endpoint("get-space-role-assignments", "GET", "/spaces/{id}/role-assignments",
             "Get space role assignments",
             params=("role-id", "role-type", "principal-id", "principal-type", "cursor", "limit")),
    Endpoint("set-space-role-assignments", "POST", "/spaces/{id}/role-assignments",
             "Set space role assignments"),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
