"""Data classification levels for spaces, pages, blog posts, whiteboards and databases."""
from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-classification-levels", "GET", "/classification-levels",
             "Get list of classification levels"),
    Endpoint("get-space-default-classification-level", "GET", "/spaces/{id}/classification-level/default",
             "Get space default classification level"),
    Endpoint("put-space-default-classification-level", "PUT", "/spaces/{id}/classification-level/default",
             "Update space default classification level"),
    Endpoint("delete-space-default-classification-level", "DELETE", "/spaces/{id}/classification-level/default",
             "Delete space default classification level"),
    Endpoint("get-page-classification-level", "GET", "/pages/{id}/classification-level",
             "Get page classification level",
             params=("status",)),
    Endpoint("put-page-classification-level", "PUT", "/pages/{id}/classification-level",
             "Update page classification level"),
    Endpoint("post-page-classification-level", "POST", "/pages/{id}/classification-level/reset",
             "Reset page classification level"),
    Endpoint("get-blog-post-classification-level", "GET", "/blogposts/{id}/classification-level",
             "Get blog post classification level",
             params=("status",)),
    Endpoint("put-blog-post-classification-level", "PUT", "/blogposts/{id}/classification-level",
             "Update blog post classification level"),
    Endpoint("post-blog-post-classification-level", "POST", "/blogposts/{id}/classification-level/reset",
             "Reset blog post classification level"),
    Endpoint("get-whiteboard-classification-level", "GET", "/whiteboards/{id}/classification-level",
             "Get whiteboard classification level"),
    Endpoint("put-whiteboard-classification-level", "PUT", "/whiteboards/{id}/classification-level",
             "Update whiteboard classification level"),
    Endpoint("post-whiteboard-classification-level", "POST", "/whiteboards/{id}/classification-level/reset",
             "Reset whiteboard classification level"),
    Endpoint("get-database-classification-level", "GET", "/databases/{id}/classification-level",
             "Get database classification level"),
    Endpoint("put-database-classification-level", "PUT", "/databases/{id}/classification-level",
             "Update database classification level"),
    Endpoint("post-database-classification-level", "POST", "/databases/{id}/classification-level/reset",
             "Reset database classification level"),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
