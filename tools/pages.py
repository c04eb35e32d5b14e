"""Pages and their full sub-resource tree.

Comment listings for a page are here since they hang off /pages/{id}; the
comment resources themselves are in tools.comments.
"""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-pages", "GET", "/pages", "Get pages",
             params=(
                 "id", "space-id", "sort", "status", "title", "body-format", "subtype", "cursor",
                 "limit",
             )),
    Endpoint("create-page", "POST", "/pages", "Create page",
             params=("embedded", "private", "root-level")),
    Endpoint("get-page-by-id", "GET", "/pages/{id}", "Get page by id",
             params=(
                 "body-format", "get-draft", "status", "version", "include-labels",
                 "include-properties", "include-operations", "include-likes", "include-versions",
                 "include-version", "include-favorited-by-current-user-status",
                 "include-webresources", "include-collaborators", "include-direct-children",
             )),
    Endpoint("update-page", "PUT", "/pages/{id}", "Update page"),
    Endpoint("delete-page", "DELETE", "/pages/{id}", "Delete page",
             params=("purge", "draft")),
    Endpoint("get-page-attachments", "GET", "/pages/{id}/attachments", "Get attachments for page",
             params=("sort", "cursor", "status", "mediaType", "filename", "limit")),
    Endpoint("get-custom-content-by-type-in-page", "GET", "/pages/{id}/custom-content",
             "Get custom content by type in page",
             required=("type",),
             params=("sort", "cursor", "limit", "body-format")),
    Endpoint("get-page-labels", "GET", "/pages/{id}/labels", "Get labels for page",
             params=("prefix", "sort", "cursor", "limit")),
    Endpoint("get-page-like-count", "GET", "/pages/{id}/likes/count", "Get like count for page"),
    Endpoint("get-page-like-users", "GET", "/pages/{id}/likes/users", "Get account IDs of likes for page",
             params=("cursor", "limit")),
    Endpoint("get-page-operations", "GET", "/pages/{id}/operations", "Get permitted operations for page"),
    Endpoint("get-page-content-properties", "GET", "/pages/{page-id}/properties",
             "Get content properties for page",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-page-property", "POST", "/pages/{page-id}/properties",
             "Create content property for page"),
    Endpoint("get-page-content-properties-by-id", "GET", "/pages/{page-id}/properties/{property-id}",
             "Get content property for page by id"),
    Endpoint("update-page-property-by-id", "PUT", "/pages/{page-id}/properties/{property-id}",
             "Update content property for page by id"),
    Endpoint("delete-page-property-by-id", "DELETE", "/pages/{page-id}/properties/{property-id}",
             "Delete content property for page by id"),
    Endpoint("post-redact-page", "POST", "/pages/{id}/redact", "Redact Content in a Confluence Page"),
    Endpoint("update-page-title", "PUT", "/pages/{id}/title", "Update page title"),
    Endpoint("get-page-versions", "GET", "/pages/{id}/versions", "Get page versions",
             params=("body-format", "cursor", "limit", "sort")),
    Endpoint("get-page-version-details", "GET", "/pages/{page-id}/versions/{version-number}",
             "Get version details for page version"),
    Endpoint("get-page-footer-comments", "GET", "/pages/{id}/footer-comments", "Get footer comments for page",
             params=("body-format", "status", "sort", "cursor", "limit")),
    Endpoint("get-page-inline-comments", "GET", "/pages/{id}/inline-comments", "Get inline comments for page",
             params=("body-format", "status", "resolution-status", "sort", "cursor", "limit")),
    Endpoint("get-child-pages", "GET", "/pages/{id}/children", "Get child pages",
             params=("cursor", "limit", "sort")),
    Endpoint("get-page-direct-children", "GET", "/pages/{id}/direct-children",
             "Get direct children of a page",
             params=("cursor", "limit", "sort")),
    Endpoint("get-page-ancestors", "GET", "/pages/{id}/ancestors", "Get all ancestors of page",
             params=("limit",)),
    Endpoint("get-page-descendants", "GET", "/pages/{id}/descendants", "Get descendants of page",
             params=("limit", "depth", "cursor")),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
