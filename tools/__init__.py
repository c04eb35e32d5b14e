# tools package for MCP server tools
# Modules in this package should expose a `get_tools() -> dict[str, core.endpoints.Endpoint]`
# The registry imports every module in this directory and registers the returned endpoints as MCP tools.
__all__ = []
