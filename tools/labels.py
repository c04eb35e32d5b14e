from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-labels", "GET", "/labels", "Get labels",
             params=("label-id", "prefix", "cursor", "sort", "limit")),
    Endpoint("get-label-attachments", "GET", "/labels/{id}/attachments", "Get attachments for label",
             params=("sort", "cursor", "limit")),
    Endpoint("get-label-blog-posts", "GET", "/labels/{id}/blogposts", "Get blog posts for label",
             params=("space-id", "body-format", "sort", "cursor", "limit")),
    Endpoint("get-label-pages", "GET", "/labels/{id}/pages", "Get pages for label",
             params=("space-id", "body-format", "sort", "cursor", "limit")),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
