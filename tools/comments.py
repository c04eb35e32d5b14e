"""Footer and inline comments, their children, likes, operations and versions, and comment content properties."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-footer-comments", "GET", "/footer-comments", "Get footer comments",
             params=("body-format", "sort", "cursor", "limit")),
    Endpoint("create-footer-comment", "POST", "/footer-comments", "Create footer comment"),
    Endpoint("get-footer-comment-by-id", "GET", "/footer-comments/{comment-id}", "Get footer comment by id",
             params=(
                 "body-format", "version", "include-properties", "include-operations",
                 "include-likes", "include-versions", "include-version",
             )),
    Endpoint("update-footer-comment", "PUT", "/footer-comments/{comment-id}", "Update footer comment"),
    Endpoint("delete-footer-comment", "DELETE", "/footer-comments/{comment-id}", "Delete footer comment"),
    Endpoint("get-footer-comment-children", "GET", "/footer-comments/{id}/children",
             "Get children footer comments",
             params=("body-format", "sort", "cursor", "limit")),
    Endpoint("get-footer-like-count", "GET", "/footer-comments/{id}/likes/count",
             "Get like count for footer comment"),
    Endpoint("get-footer-like-users", "GET", "/footer-comments/{id}/likes/users",
             "Get account IDs of likes for footer comment",
             params=("cursor", "limit")),
    Endpoint("get-footer-comment-operations", "GET", "/footer-comments/{id}/operations",
             "Get permitted operations for footer comment"),
    Endpoint("get-footer-comment-versions", "GET", "/footer-comments/{id}/versions",
             "Get footer comment versions",
             params=("body-format", "cursor", "limit", "sort")),
    Endpoint("get-footer-comment-version-details", "GET", "/footer-comments/{id}/versions/{version-number}",
             "Get version details for footer comment version"),
    Endpoint("get-inline-comments", "GET", "/inline-comments", "Get inline comments",
             params=("body-format", "sort", "cursor", "limit")),
    Endpoint("create-inline-comment", "POST", "/inline-comments", "Create inline comment"),
    Endpoint("get-inline-comment-by-id", "GET", "/inline-comments/{comment-id}", "Get inline comment by id",
             params=(
                 "body-format", "version", "include-properties", "include-operations",
                 "include-likes", "include-versions", "include-version",
             )),
    Endpoint("update-inline-comment", "PUT", "/inline-comments/{comment-id}", "Update inline comment"),
    Endpoint("delete-inline-comment", "DELETE", "/inline-comments/{comment-id}", "Delete inline comment"),
    Endpoint("get-inline-comment-children", "GET", "/inline-comments/{id}/children",
             "Get children inline comments",
             params=("body-format", "sort", "cursor", "limit")),
    Endpoint("get-inline-like-count", "GET", "/inline-comments/{id}/likes/count",
             "Get like count for inline comment"),
    Endpoint("get-inline-like-users", "GET", "/inline-comments/{id}/likes/users",
             "Get account IDs of likes for inline comment",
             params=("cursor", "limit")),
    Endpoint("get-inline-comment-operations", "GET", "/inline-comments/{id}/operations",
             "Get permitted operations for inline comment"),
    Endpoint("get-inline-comment-versions", "GET", "/inline-comments/{id}/versions",
             "Get inline comment versions",
             params=("body-format", "cursor", "limit", "sort")),
    Endpoint("get-inline-comment-version-details", "GET", "/inline-comments/{id}/versions/{version-number}",
             "Get version details for inline comment version"),
    Endpoint("get-comment-content-properties", "GET", "/comments/{comment-id}/properties",
             "Get content properties for comment",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-comment-property", "POST", "/comments/{comment-id}/properties",
             "Create content property for comment"),
    Endpoint("get-comment-content-properties-by-id", "GET", "/comments/{comment-id}/properties/{property-id}",
             "Get content property for comment by id"),
    Endpoint("update-comment-property-by-id", "PUT", "/comments/{comment-id}/properties/{property-id}",
             "Update content property for comment by id"),
    Endpoint("delete-comment-property-by-id", "DELETE", "/comments/{comment-id}/properties/{property-id}",
             "Delete content property for comment by id"),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
