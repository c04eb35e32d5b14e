from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("create-folder", "POST", "/folders", "Create folder"),
    Endpoint("get-folder-by-id", "GET", "/folders/{id}", "Get folder by id",
             params=(
                 "include-collaborators", "include-direct-children", "include-operations",
                 "include-properties",
             )),
    Endpoint("delete-folder", "DELETE", "/folders/{id}", "Delete folder"),
    Endpoint("get-folder-content-properties", "GET", "/folders/{id}/properties",
             "Get content properties for folder",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-folder-property", "POST", "/folders/{id}/properties",
             "Create content property for folder"),
    Endpoint("get-folder-content-properties-by-id", "GET", "/folders/{folder-id}/properties/{property-id}",
             "Get content property for folder by id"),
    Endpoint("update-folder-property-by-id", "PUT", "/folders/{folder-id}/properties/{property-id}",
             "Update content property for folder by id"),
    Endpoint("delete-folder-property-by-id", "DELETE", "/folders/{folder-id}/properties/{property-id}",
             "Delete content property for folder by id"),
    Endpoint("get-folder-operations", "GET", "/folders/{id}/operations",
             "Get permitted operations for a folder"),
    Endpoint("get-folder-direct-children", "GET", "/folders/{id}/direct-children",
             "Get direct children of a folder",
             params=("cursor", "limit", "sort")),
    Endpoint("get-folder-descendants", "GET", "/folders/{id}/descendants", "Get descendants of folder",
             params=("limit", "depth", "cursor")),
    Endpoint("get-folder-ancestors", "GET", "/folders/{id}/ancestors", "Get all ancestors of folder",
             params=("limit",)),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
