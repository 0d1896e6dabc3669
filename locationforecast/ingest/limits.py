"""Concurrency and request-rate limiting around a ForecastClient.

The API asks clients to stay under 20 requests per second. ForecastClient
does not enforce this; wrap it in LimitedForecastClient when a caller fans
out over many coordinates.
"""

import asyncio
import logging
import time

from locationforecast.config.schema import ClientConfig
from locationforecast.ingest.client import ForecastClient
from locationforecast.models.params import CoordinateLike
from locationforecast.models.response import ForecastResponse

logger = logging.getLogger(__name__)


class LimitedForecastClient:
    def __init__(
        self,
        client: ForecastClient,
        concurrency_limit: int = 50,
        rate_limit: int = 20,
        per_seconds: float = 1.0,
    ):
        if concurrency_limit < 1:
            raise ValueError("concurrency_limit must be at least 1")
        if rate_limit < 1:
            raise ValueError("rate_limit must be at least 1")
        if per_seconds <= 0:
            raise ValueError("per_seconds must be positive")
        self.client = client
        self.concurrency_limit = concurrency_limit
        self.rate_limit = rate_limit
        self.per_seconds = per_seconds
        self._in_flight = asyncio.Semaphore(concurrency_limit)
        self._rate_lock = asyncio.Lock()
        self._window_end = 0.0
        self._remaining = 0

    @classmethod
    def from_config(
        cls, config: ClientConfig, client: ForecastClient | None = None
    ) -> "LimitedForecastClient":
        return cls(
            client or ForecastClient.from_config(config),
            concurrency_limit=config.concurrency_limit,
            rate_limit=config.rate_limit,
            per_seconds=config.rate_period_seconds,
        )

    async def fetch(
        self,
        coordinate: CoordinateLike,
        last_response: ForecastResponse | None = None,
    ) -> ForecastResponse:
        async with self._in_flight:
            await self._acquire_rate_slot()
            return await self.client.fetch(coordinate, last_response)

    async def _acquire_rate_slot(self) -> None:
        """Wait until the current window has a free request slot."""
        async with self._rate_lock:
            now = time.monotonic()
            if now >= self._window_end:
                self._window_end = now + self.per_seconds
                self._remaining = self.rate_limit
            if self._remaining == 0:
                delay = self._window_end - now
                logger.debug("Rate limit of %d/%.1fs reached, waiting %.3fs",
                             self.rate_limit, self.per_seconds, delay)
                await asyncio.sleep(delay)
                self._window_end = time.monotonic() + self.per_seconds
                self._remaining = self.rate_limit
            self._remaining -= 1

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> "LimitedForecastClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
