from typing import Any

from core.endpoints import Endpoint

ENDPOINTS = [
    Endpoint("convert-content-ids-to-content-types", "POST", "/content/convert-ids-to-types",
             "Convert content ids to content types"),
]


def get_tools() -> dict[str, Any]:
    return {endpoint.name: endpoint for endpoint in ENDPOINTS}
