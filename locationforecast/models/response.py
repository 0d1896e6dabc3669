"""Forecast response returned by the client."""

from dataclasses import dataclass
from datetime import UTC, datetime

from locationforecast.models.common import utc_now
from locationforecast.models.forecast import Forecast


@dataclass(frozen=True)
class ForecastResponse:
    forecast: Forecast
    raw_body: str
    status: int
    expires_at: datetime | None = None
    last_modified: str | None = None  # verbatim header, echoed in If-Modified-Since

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the API allows this response to be refreshed yet.

        A response without a usable Expires header is always considered expired.
        A naive ``now`` is taken to be UTC.
        """
        if self.expires_at is None:
            return True
        if now is None:
            now = utc_now()
        elif now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        return now >= self.expires_at
