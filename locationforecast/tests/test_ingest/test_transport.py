"""Tests for HttpxTransport."""

import httpx
import pytest
import respx

from locationforecast.errors import TransportError
from locationforecast.ingest.transport import HttpxTransport, RawResponse

URL = "https://test-met.example.com/complete"


class TestHttpxTransport:
    @pytest.mark.asyncio
    @respx.mock
    async def test_get(self):
        route = respx.get(URL).mock(
            return_value=httpx.Response(
                203, text='{"ok": true}', headers={"Last-Modified": "yesterday"}
            )
        )
        transport = HttpxTransport(timeout=5.0)

        raw = await transport.get(URL, params={"lat": "1.5", "lon": "2"}, headers={"User-Agent": "ua"})
        await transport.aclose()

        assert raw.status == 203
        assert raw.body == '{"ok": true}'
        assert raw.header("last-modified") == "yesterday"
        request = route.calls[0].request
        assert request.url.params["lat"] == "1.5"
        assert request.url.params["lon"] == "2"
        assert request.headers["user-agent"] == "ua"

    @pytest.mark.asyncio
    @respx.mock
    async def test_accepts_gzip(self):
        route = respx.get(URL).mock(return_value=httpx.Response(200, text="{}"))
        transport = HttpxTransport()

        await transport.get(URL, params={}, headers={})
        await transport.aclose()

        assert "gzip" in route.calls[0].request.headers["accept-encoding"]

    @pytest.mark.asyncio
    async def test_injected_client(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        raw = await transport.get(URL, params={}, headers={})
        await transport.aclose()

        assert raw.status == 500
        assert raw.body == "boom"

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_error_wrapped(self):
        respx.get(URL).mock(side_effect=httpx.ConnectTimeout("slow"))
        transport = HttpxTransport()

        with pytest.raises(TransportError, match="slow"):
            await transport.get(URL, params={}, headers={})
        await transport.aclose()


class TestRawResponse:
    def test_header_lookup_case_insensitive(self):
        raw = RawResponse(200, "", {"Expires": "soon"})
        assert raw.header("expires") == "soon"
        assert raw.header("EXPIRES") == "soon"
        assert raw.header("last-modified") is None
