from importlib import import_module
from pathlib import Path
from typing import Any, Iterable
import logging
import pkgutil

import mcp.types as types

from core.endpoints import Endpoint
from core.errors import DuplicateToolError, UnknownToolError
from core.http_client import ConfluenceClient
from utils.response_utils import handle_error, handle_result

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "tools"


def discover_endpoints(package: str = TOOLS_PACKAGE) -> dict[str, Endpoint]:
    """Import every module of `package` and collect the endpoints from their get_tools().

    Modules whose name starts with an underscore are skipped. A tool name may only
    be declared once across the package.
    """
    pkg = import_module(package)
    tools_path = Path(pkg.__file__).resolve().parent
    endpoints: dict[str, Endpoint] = {}
    for _finder, name, _ispkg in sorted(pkgutil.iter_modules([str(tools_path)]), key=lambda m: m.name):
        if name.startswith("_"):
            continue
        module_name = f"{package}.{name}"
        mod = import_module(module_name)
        if not hasattr(mod, "get_tools"):
            logger.warning(f"Tools module {module_name} has no get_tools(); skipping")
            continue
        mapping = mod.get_tools()
        for tool_name, endpoint in mapping.items():
            if tool_name in endpoints:
                raise DuplicateToolError(tool_name, module_name)
            endpoints[tool_name] = endpoint
        logger.info(f"Imported tools module: {module_name} ({len(mapping)} tools)")
    return endpoints


def bearer_from_header(authorization: str | None) -> str | None:
    """Token part of an `authorization` header value ("Bearer abc" -> "abc")."""
    if not authorization:
        return None
    token = authorization.replace("Bearer ", "", 1).strip()
    return token or None


def tool_annotations(endpoint: Endpoint) -> types.ToolAnnotations:
    return types.ToolAnnotations(
        title=endpoint.title,
        readOnlyHint=endpoint.method == "GET",
        destructiveHint=endpoint.method == "DELETE",
        idempotentHint=endpoint.method in ("GET", "PUT", "DELETE"),
        openWorldHint=True,
    )


class ToolRegistry:
    """Maps tool names to endpoints and runs invocations against Confluence."""

    def __init__(self, endpoints: Iterable[Endpoint], client: ConfluenceClient):
        self.client = client
        self._endpoints: dict[str, Endpoint] = {}
        for endpoint in endpoints:
            if endpoint.name in self._endpoints:
                raise DuplicateToolError(endpoint.name, "registry")
            self._endpoints[endpoint.name] = endpoint

    def __len__(self) -> int:
        return len(self._endpoints)

    @property
    def names(self) -> list[str]:
        return list(self._endpoints)

    def get(self, name: str) -> Endpoint:
        try:
            return self._endpoints[name]
        except KeyError:
            raise UnknownToolError(name) from None

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=endpoint.name,
                title=endpoint.title,
                description=endpoint.description,
                inputSchema=endpoint.input_schema(),
                annotations=tool_annotations(endpoint),
            )
            for endpoint in self._endpoints.values()
        ]

    async def call(self, name: str, arguments: dict[str, Any] | None, bearer: str | None = None) -> types.CallToolResult:
        """Run one tool invocation; failures come back as error results, never as exceptions."""
        try:
            endpoint = self.get(name)
            request = endpoint.bind(arguments)
            logger.info(f"Tool {name}: {request.method} {request.path}")
            data = await self.client.request(
                request.method,
                request.path,
                params=request.params,
                json=request.json,
                bearer=bearer,
            )
            return handle_result(data)
        except Exception as e:
            return handle_error(e)
