from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("create-database", "POST", "/databases", "Create database",
             params=("private",)),
    Endpoint("get-database-by-id", "GET", "/databases/{id}", "Get database by id",
             params=(
                 "include-collaborators", "include-direct-children", "include-operations",
                 "include-properties",
             )),
    Endpoint("delete-database", "DELETE", "/databases/{id}", "Delete database"),
    Endpoint("get-database-content-properties", "GET", "/databases/{id}/properties",
             "Get content properties for database",
             params=("key", "sort", "cursor", "limit")),
    Endpoint("create-database-property", "POST", "/databases/{id}/properties",
             "Create content property for database"),
    Endpoint("get-database-content-properties-by-id", "GET", "/databases/{database-id}/properties/{property-id}",
             "Get content property for database by id"),
    Endpoint("update-database-property-by-id", "PUT", "/databases/{database-id}/properties/{property-id}",
             "Update content property for database by id"),
    Endpoint("delete-database-property-by-id", "DELETE", "/databases/{database-id}/properties/{property-id}",
             "Delete content property for database by id"),
    Endpoint("get-database-operations", "GET", "/databases/{id}/operations",
             "Get permitted operations for a database"),
    Endpoint("get-database-direct-children", "GET", "/databases/{id}/direct-children",
             "Get direct children of a database",
             params=("cursor", "limit", "sort")),
    Endpoint("get-database-descendants", "GET", "/databases/{id}/descendants",
             "Get descendants of a database",
             params=("limit", "depth", "cursor")),
    Endpoint("get-database-ancestors", "GET", "/databases/{id}/ancestors", "Get all ancestors of database",
             params=("limit",)),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
