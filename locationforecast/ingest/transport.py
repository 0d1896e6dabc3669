"""HTTP transport used by the forecast client.

The client only needs "something that can GET a URL and hand back status,
body and headers". ``HttpxTransport`` is the default implementation; tests
and callers may pass any object with the same shape.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

import httpx

from locationforecast.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    status: int
    body: str
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None


class HttpTransport(Protocol):
    async def get(
        self,
        url: str,
        *,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> RawResponse: ...

    async def aclose(self) -> None: ...


class HttpxTransport:
    """Transport backed by a shared ``httpx.AsyncClient``.

    httpx negotiates gzip on its own. Timeouts are enforced here and surface
    as ``TransportError`` like any other connection failure.
    """

    def __init__(self, timeout: float = 30.0, client: httpx.AsyncClient | None = None):
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def get(
        self,
        url: str,
        *,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> RawResponse:
        try:
            resp = await self._client.get(url, params=dict(params), headers=dict(headers))
        except httpx.RequestError as e:
            logger.warning("GET %s failed: %s", url, e)
            raise TransportError(f"Request failed: {e}") from e
        return RawResponse(
            status=resp.status_code,
            body=resp.text,
            headers=dict(resp.headers),
        )

    async def aclose(self) -> None:
        await self._client.aclose()
