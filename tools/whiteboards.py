from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("create-whiteboard", "POST", "/whiteboards", "Create whiteboard",
             params=("private",)),
    Endpoint("get-whiteboard-by-id", "GET", "/whiteboards/{id}", "Get whiteboard by id",
             params=(
                 "include-collaborators", "include-direct-children", "include-operations",
                 "include-properties",
             )),
    Endpoint("delete-whiteboard", "DELETE", "/whiteboards/{id}", "Delete whiteboard"),
    Endpoint("get-whiteboard-content-properties", "GET", "/whiteboards/{id}/properties",
             "Get content properties for whiteboard",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-whiteboard-property", "POST", "/whiteboards/{id}/properties",
             "Create content property for whiteboard"),
    Endpoint("get-whiteboard-content-properties-by-id", "GET", "/whiteboards/{whiteboard-id}/properties/{property-id}",
             "Get content property for whiteboard by id"),
    Endpoint("update-whiteboard-property-by-id", "PUT", "/whiteboards/{whiteboard-id}/properties/{property-id}",
             "Update content property for whiteboard by id"),
    Endpoint("delete-whiteboard-property-by-id", "DELETE", "/whiteboards/{whiteboard-id}/properties/{property-id}",
             "Delete content property for whiteboard by id"),
    Endpoint("get-whiteboard-operations", "GET", "/whiteboards/{id}/operations",
             "Get permitted operations for a whiteboard"),
    Endpoint("get-whiteboard-direct-children", "GET", "/whiteboards/{id}/direct-children",
             "Get direct children of a whiteboard",
             params=("cursor", "limit", "sort")),
    Endpoint("get-whiteboard-descendants", "GET", "/whiteboards/{id}/descendants",
             "Get descendants of a whiteboard",
             params=("limit", "depth", "cursor")),
    Endpoint("get-whiteboard-ancestors", "GET", "/whiteboards/{id}/ancestors",
             "Get all ancestors of whiteboard",
             params=("limit",)),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
