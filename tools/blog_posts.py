"""Blog posts and their sub-resources.

Classification level endpoints for blog posts live in tools.classification.
"""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-blog-posts", "GET", "/blogposts", "Get blog posts",
             params=("id", "space-id", "sort", "status", "title", "body-format", "cursor", "limit")),
    Endpoint("create-blog-post", "POST", "/blogposts", "Create blog post",
             params=("private",)),
    Endpoint("get-blog-post-by-id", "GET", "/blogposts/{id}", "Get blog post by id",
             params=(
                 "body-format", "get-draft", "status", "version", "include-labels",
                 "include-properties", "include-operations", "include-likes", "include-versions",
                 "include-version", "include-favorited-by-current-user-status",
                 "include-webresources", "include-collaborators",
             )),
    Endpoint("update-blog-post", "PUT", "/blogposts/{id}", "Update blog post"),
    Endpoint("delete-blog-post", "DELETE", "/blogposts/{id}", "Delete blog post",
             params=("purge", "draft")),
    Endpoint("get-blogpost-attachments", "GET", "/blogposts/{id}/attachments",
             "Get attachments for blog post",
             params=("sort", "cursor", "status", "mediaType", "filename", "limit")),
    Endpoint("get-custom-content-by-type-in-blog-post", "GET", "/blogposts/{id}/custom-content",
             "Get custom content by type in blog post",
             required=("type",),
             params=("sort", "cursor", "limit", "body-format")),
    Endpoint("get-blog-post-labels", "GET", "/blogposts/{id}/labels", "Get labels for blog post",
             params=("prefix", "sort", "cursor", "limit")),
    Endpoint("get-blog-post-like-count", "GET", "/blogposts/{id}/likes/count",
             "Get like count for blog post"),
    Endpoint("get-blog-post-like-users", "GET", "/blogposts/{id}/likes/users",
             "Get account IDs of likes for blog post",
             params=("cursor", "limit")),
    Endpoint("get-blogpost-content-properties", "GET", "/blogposts/{blogpost-id}/properties",
             "Get content properties for blog post",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-blogpost-property", "POST", "/blogposts/{blogpost-id}/properties",
             "Create content property for blog post"),
    Endpoint("get-blogpost-content-properties-by-id", "GET", "/blogposts/{blogpost-id}/properties/{property-id}",
             "Get content property for blog post by id"),
    Endpoint("update-blogpost-property-by-id", "PUT", "/blogposts/{blogpost-id}/properties/{property-id}",
             "Update content property for blog post by id"),
    Endpoint("delete-blogpost-property-by-id", "DELETE", "/blogposts/{blogpost-id}/properties/{property-id}",
             "Delete content property for blogpost by id"),
    Endpoint("get-blog-post-operations", "GET", "/blogposts/{id}/operations",
             "Get permitted operations for blog post"),
    Endpoint("get-blog-post-versions", "GET", "/blogposts/{id}/versions", "Get blog post versions",
             params=("body-format", "cursor", "limit", "sort")),
    Endpoint("get-blog-post-version-details", "GET", "/blogposts/{blogpost-id}/versions/{version-number}",
             "Get version details for blog post version"),
    Endpoint("post-redact-blog", "POST", "/blogposts/{id}/redact",
             "Redact Content in a Confluence Blog Post"),
    Endpoint("get-blog-post-footer-comments", "GET", "/blogposts/{id}/footer-comments",
             "Get footer comments for blog post",
             params=("body-format", "status", "sort", "cursor", "limit")),
    Endpoint("get-blog-post-inline-comments", "GET", "/blogposts/{id}/inline-comments",
             "Get inline comments for blog post",
             params=("body-format", "status", "resolution-status", "sort", "cursor", "limit")),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
