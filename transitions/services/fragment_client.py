"""
Fragment Client

HTTP implementation of the fragment provider, talking to the demo server's
``/api/page/{page_id}`` endpoint with httpx.
"""

import logging
from typing import Any

import httpx

from transitions.exceptions import ContentNotFound, TransportFailure
from transitions.interfaces import IFragmentProvider
from transitions.models import Fragment

logger = logging.getLogger(__name__)

FRAGMENT_PATH = "/api/page/{page_id}"


class HttpFragmentProvider(IFragmentProvider):
    """
    Fetches page fragments over HTTP.

    The provider owns its ``httpx.AsyncClient`` unless one is injected; use it
    as an async context manager or call ``aclose()`` when done.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> "HttpFragmentProvider":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch(self, page_id: str) -> Fragment:
        path = FRAGMENT_PATH.format(page_id=page_id)

        try:
            response = await self._client.get(path, headers={"Accept": "application/json"})
        except httpx.TimeoutException as e:
            raise TransportFailure(page_id, f"Timed out fetching page '{page_id}'") from e
        except httpx.HTTPError as e:
            raise TransportFailure(page_id, f"Network error fetching page '{page_id}': {e}") from e

        if response.status_code == httpx.codes.NOT_FOUND:
            payload = self._safe_json(response)
            raise ContentNotFound(page_id, payload.get("error") if payload else None)

        if response.is_error:
            raise TransportFailure(
                page_id,
                f"Server returned {response.status_code} for page '{page_id}'",
                status_code=response.status_code,
            )

        payload = self._safe_json(response)
        if not payload or not isinstance(payload.get("html"), str):
            raise ContentNotFound(page_id, f"Malformed fragment payload for page '{page_id}'")

        logger.debug(f"Fetched fragment for {page_id} ({len(payload['html'])} chars)")
        return Fragment(html=payload["html"], page_id=payload.get("pageId", page_id))

    @staticmethod
    def _safe_json(response: httpx.Response) -> dict[str, Any] | None:
        try:
            payload = response.json()
        except ValueError:
            return None
        return payload if isinstance(payload, dict) else None
