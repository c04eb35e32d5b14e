from typing import Any
import logging

import httpx

from utils.response_utils import robust_parse_text

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json"}


class ConfluenceClient:
    """Thin async client for the Confluence REST API v2.

    Base URL, default headers and timeout are fixed when the client is built and
    shared by every tool call. Each call may carry its own bearer token.
    """

    def __init__(self, base_url: str, timeout: float = 30.0, transport: httpx.AsyncBaseTransport | None = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=DEFAULT_HEADERS,
            timeout=timeout,
            transport=transport,
        )

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
        bearer: str | None = None,
    ) -> Any:
        """Issue one request and return the decoded response body.

        Raises httpx.HTTPStatusError for non-2xx responses and httpx.RequestError
        for connection failures and timeouts.
        """
        headers = {"Authorization": f"Bearer {bearer}"} if bearer else None
        resp = await self._client.request(method, path, params=params, json=json, headers=headers)
        resp.raise_for_status()
        if not resp.content:
            return ""
        try:
            return resp.json()
        except ValueError as e:
            logger.warning(
                f"Failed to decode JSON from {method} {path}: {e}; returning parsed fallback (raw/ndjson/first-chunk)"
            )
            return robust_parse_text(resp.text)

    async def aclose(self) -> None:
        await self._client.aclose()
