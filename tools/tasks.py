from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("get-tasks", "GET", "/tasks", "Get tasks",
             params=(
                 "body-format", "include-blank-tasks", "status", "task-id", "space-id", "page-id",
                 "blogpost-id", "created-by", "assigned-to", "completed-by", "created-at-from",
                 "created-at-to", "due-at-from", "due-at-to", "completed-at-from",
                 "completed-at-to", "cursor", "limit",
             )),
    Endpoint("get-task-by-id", "GET", "/tasks/{id}", "Get task by id",
             params=("body-format",)),
    Endpoint("update-task", "PUT", "/tasks/{id}", "Update task",
             params=("body-format",)),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
