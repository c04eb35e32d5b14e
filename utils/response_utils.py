"""Shaping of tool results and tolerant parsing of HTTP response bodies.

`handle_result` and `handle_error` turn every outcome of a tool call into one of
two `CallToolResult` shapes: pretty-printed JSON text, or an error flag with a
single human-readable message.

`robust_parse_text` handles bodies that are not plain JSON:
- Normal JSON (json.loads)
- NDJSON (newline-delimited JSON, returns list or single object)
- Text containing a JSON object plus extra data (uses json.JSONDecoder().raw_decode)
- Falls back to returning the original text if parsing fails
"""
from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from mcp.types import CallToolResult, TextContent

logger = logging.getLogger(__name__)


def robust_parse_text(text: str) -> Any:
    """Try to parse text as JSON. If it fails, try NDJSON (one JSON per line), then raw_decode the first JSON object, else return raw text.

    Returns the parsed Python object (dict/list/primitive) or the original text string if parsing failed.
    """
    # Try canonical JSON first
    try:
        return json.loads(text)
    except ValueError:
        pass

    # Try NDJSON: parse each non-empty line as JSON
    try:
        lines = [ln for ln in text.splitlines() if ln.strip()]
        objs = [json.loads(ln) for ln in lines]
        if objs:
            return objs if len(objs) > 1 else objs[0]
    except ValueError:
        pass

    # Try to extract the first JSON object from a noisy text blob
    try:
        decoder = json.JSONDecoder()
        obj, _ = decoder.raw_decode(text)
        return obj
    except ValueError:
        pass

    # Give up and return raw text
    return text


def handle_result(data: Any) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=json.dumps(data, indent=2, ensure_ascii=False))],
    )


def _remote_message(error: httpx.HTTPStatusError) -> str | None:
    try:
        body = error.response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        message = body["message"]
        return message if isinstance(message, str) else json.dumps(message, ensure_ascii=False)
    return None


def error_message(error: BaseException) -> str:
    """Describe `error` the way tool callers see it.

    HTTP failures become "API Error: <remote message>" when Confluence supplied
    one, else "API Error: <transport description>". Anything else is "Error: <error>".
    """
    if isinstance(error, httpx.HTTPError):
        message = _remote_message(error) if isinstance(error, httpx.HTTPStatusError) else None
        return f"API Error: {message or str(error) or type(error).__name__}"
    return f"Error: {error}"


def handle_error(error: BaseException) -> CallToolResult:
    message = error_message(error)
    logger.error(message)
    return CallToolResult(isError=True, content=[TextContent(type="text", text=message)])
