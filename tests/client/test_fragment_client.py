"""
HttpFragmentProvider Tests

Tests the HTTP fragment provider against an in-process httpx transport.
"""

import httpx
import pytest

from transitions.exceptions import ContentNotFound, TransportFailure
from transitions.services import HttpFragmentProvider


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://testserver")


class TestHttpFragmentProvider:
    """Mapping of HTTP outcomes onto fragments and navigation errors."""

    @pytest.mark.asyncio
    async def test_fetch_returns_fragment(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"html": '<section data-page-id="effects"></section>', "pageId": "effects"}
            )

        async with make_client(handler) as client:
            provider = HttpFragmentProvider(client=client)
            fragment = await provider.fetch("effects")

        assert fragment.page_id == "effects"
        assert "data-page-id" in fragment.html
        assert seen[0].url.path == "/api/page/effects"
        assert seen[0].headers["accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_not_found_raises_content_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": "Page not found"})

        async with make_client(handler) as client:
            with pytest.raises(ContentNotFound) as exc_info:
                await HttpFragmentProvider(client=client).fetch("nope")

        assert exc_info.value.message == "Page not found"
        assert exc_info.value.page_id == "nope"

    @pytest.mark.asyncio
    async def test_not_found_without_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="missing")

        async with make_client(handler) as client:
            with pytest.raises(ContentNotFound, match="nope"):
                await HttpFragmentProvider(client=client).fetch("nope")

    @pytest.mark.asyncio
    async def test_server_error_raises_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        async with make_client(handler) as client:
            with pytest.raises(TransportFailure) as exc_info:
                await HttpFragmentProvider(client=client).fetch("ready")

        assert exc_info.value.status_code == 503
        assert exc_info.value.to_dict()["details"] == {"page_id": "ready", "status_code": 503}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [httpx.ConnectError("connection refused"), httpx.ReadTimeout("too slow")],
    )
    async def test_network_errors_raise_transport_failure(self, error):
        def handler(request: httpx.Request) -> httpx.Response:
            raise error

        async with make_client(handler) as client:
            with pytest.raises(TransportFailure):
                await HttpFragmentProvider(client=client).fetch("welcome")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{"pageId": "welcome"}, {"html": 42}, ["html"]])
    async def test_malformed_payload_raises_content_not_found(self, payload):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=payload)

        async with make_client(handler) as client:
            with pytest.raises(ContentNotFound, match="Malformed"):
                await HttpFragmentProvider(client=client).fetch("welcome")

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self):
        client = make_client(lambda request: httpx.Response(200, json={"html": ""}))

        async with HttpFragmentProvider(client=client):
            pass

        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_is_closed(self):
        provider = HttpFragmentProvider(base_url="http://testserver", timeout=1.0)

        await provider.aclose()

        assert provider._client.is_closed is True
