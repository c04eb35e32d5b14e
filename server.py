from core.logging_config import setup_logging, set_log_level
from core.config import get_config, get_request_timeout, load_credentials
from core.errors import ConfigError
from core.http_client import ConfluenceClient
from core.registry import ToolRegistry, bearer_from_header, discover_endpoints
from utils import get_endpoint
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
import mcp.types as types
from starlette.applications import Starlette
from starlette.routing import Mount
from starlette.types import Receive, Scope, Send
from pathlib import Path
from typing import Any
import asyncio
import contextlib
import logging
import sys
import uvicorn

logger = logging.getLogger(__name__)

SERVER_NAME = "confluence-mcp-server"
SERVER_VERSION = "2.0.0"
TRANSPORTS = ("stdio", "streamable-http")

# MCP log levels -> stdlib levels
MCP_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "notice": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "alert": logging.CRITICAL,
    "emergency": logging.CRITICAL,
}

###################################################### Instructions ######################################################


def load_instructions(resources_dir: Path | None = None) -> str | None:
    """Return resources/assistant_instructions.md, sent to clients on initialize, if it exists."""
    if resources_dir is None:
        resources_dir = Path(__file__).resolve().parent / "resources"
    instructions_file = resources_dir / "assistant_instructions.md"
    if not instructions_file.is_file():
        return None
    content = instructions_file.read_text(encoding="utf-8").strip()
    return content or None

###################################################### MCP Server ######################################################


def current_bearer(server: Server) -> str | None:
    """Bearer token of the HTTP request behind the tool call being handled, if any.

    stdio sessions have no HTTP request, so calls go out unauthenticated.
    """
    try:
        ctx = server.request_context
    except LookupError:
        return None
    request = getattr(ctx, "request", None)
    headers = getattr(request, "headers", None)
    if headers is None:
        return None
    return bearer_from_header(headers.get("authorization"))


def create_server(registry: ToolRegistry, instructions: str | None = None) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION, instructions=instructions)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return registry.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> types.CallToolResult:
        return await registry.call(name, arguments, bearer=current_bearer(server))

    @server.set_logging_level()
    async def set_logging_level(level: types.LoggingLevel) -> None:
        set_log_level(MCP_LOG_LEVELS.get(level, logging.INFO))
        logger.info(f"Log level set to {level} by client")

    logger.info(f"MCP server instance created with {len(registry)} tools, instructions: {bool(instructions)}")
    return server

###################################################### Transports ######################################################


async def run_stdio(server: Server, client: ConfluenceClient) -> None:
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()


def build_http_app(server: Server, client: ConfluenceClient, path: str = "/mcp") -> Starlette:
    """Starlette app serving the MCP streamable HTTP transport at `path`.

    Stateless: every request is handled on its own, so each tool call sees the
    authorization header of the request that carried it.
    """
    session_manager = StreamableHTTPSessionManager(app=server, event_store=None, json_response=False, stateless=True)

    async def handle_streamable_http(scope: Scope, receive: Receive, send: Send) -> None:
        await session_manager.handle_request(scope, receive, send)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        async with session_manager.run():
            logger.info(f"Streamable HTTP session manager started at {path}")
            try:
                yield
            finally:
                await client.aclose()
                logger.info("Streamable HTTP session manager stopped")

    return Starlette(routes=[Mount(path, app=handle_streamable_http)], lifespan=lifespan)

###################################################### Startup ######################################################


def main() -> None:
    try:
        cfg = get_config()
        transport = str(cfg.get("transport", "streamable-http"))
        # stdout carries the protocol on stdio, so console logs go to stderr there
        setup_logging(level=cfg.get("log_level", "INFO"), stream=sys.stderr if transport == "stdio" else sys.stdout)
        logger.info("MCP server bootstrap starting.")
        if transport not in TRANSPORTS:
            raise ConfigError(f"'transport' must be one of {', '.join(TRANSPORTS)}, got {transport!r}")

        load_credentials()
        base_url = get_endpoint(cfg=cfg)
        client = ConfluenceClient(base_url, timeout=get_request_timeout(cfg))
        logger.info(f"Confluence API root: {base_url}")

        endpoints = discover_endpoints()
        registry = ToolRegistry(endpoints.values(), client)
        logger.info(f"Total tools registered: {len(registry)}")
        logger.debug(f"Registered tool names: {registry.names}")
        server = create_server(registry, instructions=load_instructions())
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(2)
    except Exception:
        logger.exception("Failed to start MCP server")
        print("Startup failed. See logs/server_<timestamp>.log for details.", file=sys.stderr)
        sys.exit(-1)

    logger.info(f"Starting MCP server ({transport})...")
    try:
        if transport == "stdio":
            asyncio.run(run_stdio(server, client))
        else:
            app = build_http_app(server, client, path=cfg.get("http_path", "/mcp"))
            uvicorn.run(app, host=cfg.get("host", "127.0.0.1"), port=int(cfg.get("port", 8000)))
        logger.info("MCP server shut down.")
    except KeyboardInterrupt:
        logger.info("Shutting down Confluence MCP server...")
    except Exception:
        logger.exception("Unhandled exception running MCP server")
        print("Unhandled exception occurred. See logs/server_<timestamp>.log for details.", file=sys.stderr)
        sys.exit(-1)


if __name__ == "__main__":
    main()
