"""LocationForecast API client."""

import logging
import re
from datetime import datetime

from pydantic import ValidationError

from locationforecast.config.schema import DEFAULT_BASE_URL, ClientConfig
from locationforecast.errors import ApiError, DeserializationError, InvalidIdentityError
from locationforecast.ingest.transport import HttpTransport, HttpxTransport, RawResponse
from locationforecast.models.common import parse_http_date
from locationforecast.models.forecast import Forecast
from locationforecast.models.params import CoordinateLike, to_coordinate
from locationforecast.models.response import ForecastResponse

logger = logging.getLogger(__name__)

_EMAIL_RE = re.compile(r"[^\s@<>()]+@[^\s@<>()]+\.[^\s@<>()]+")
_URL_RE = re.compile(r"https?://\S+")


class ForecastClient:
    """Fetches forecasts for a coordinate.

    The API's terms of service require every request to identify the
    application and give a way to contact its operator, e.g.
    ``"myapp.example.com support@example.com"``. The string is sent verbatim
    as ``User-Agent``.

    The client keeps no per-request state, so one instance can serve many
    concurrent ``fetch`` calls. It never retries or rate limits on its own;
    see ``LimitedForecastClient`` for the latter.
    """

    def __init__(
        self,
        user_agent: str,
        transport: HttpTransport | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ):
        self._user_agent = validate_identity(user_agent)
        self._base_url = base_url
        self._transport = transport or HttpxTransport(timeout=timeout)

    @classmethod
    def from_config(
        cls, config: ClientConfig, transport: HttpTransport | None = None
    ) -> "ForecastClient":
        return cls(
            config.user_agent,
            transport=transport,
            base_url=config.base_url,
            timeout=config.timeout_seconds,
        )

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch(
        self,
        coordinate: CoordinateLike,
        last_response: ForecastResponse | None = None,
    ) -> ForecastResponse:
        """Fetch the forecast for a coordinate.

        If ``last_response`` is given and has not expired yet it is returned
        as is, without a request. Otherwise the request is made conditional on
        its Last-Modified value and a 304 answer reuses its body.
        """
        coord = to_coordinate(coordinate)

        if last_response is not None and not last_response.is_expired():
            logger.debug(
                "Reusing forecast for (%s, %s), valid until %s",
                coord.latitude, coord.longitude, last_response.expires_at,
            )
            return last_response

        headers = {"User-Agent": self._user_agent}
        if last_response is not None and last_response.last_modified:
            headers["If-Modified-Since"] = last_response.last_modified

        logger.debug("GET %s lat=%s lon=%s", self._base_url, coord.latitude, coord.longitude)
        raw = await self._transport.get(
            self._base_url, params=coord.query_params(), headers=headers
        )

        if raw.status == 304 and last_response is not None:
            logger.debug("Forecast for (%s, %s) not modified", coord.latitude, coord.longitude)
            return ForecastResponse(
                forecast=last_response.forecast,
                raw_body=last_response.raw_body,
                status=raw.status,
                expires_at=_expires_at(raw),
                last_modified=raw.header("last-modified") or last_response.last_modified,
            )

        if not 200 <= raw.status < 300:
            logger.warning(
                "LocationForecast returned %d for (%s, %s): %s",
                raw.status, coord.latitude, coord.longitude, raw.body[:200],
            )
            raise ApiError(raw.status, raw.body)

        return ForecastResponse(
            forecast=parse_forecast(raw.body),
            raw_body=raw.body,
            status=raw.status,
            expires_at=_expires_at(raw),
            last_modified=raw.header("last-modified"),
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "ForecastClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def validate_identity(user_agent: str) -> str:
    """Return the stripped identity string or raise InvalidIdentityError."""
    if not isinstance(user_agent, str) or not user_agent.strip():
        raise InvalidIdentityError("User agent must be a non-empty string")
    value = user_agent.strip()
    if not value.isascii() or any(not ch.isprintable() for ch in value):
        raise InvalidIdentityError(
            f"User agent must be printable ASCII: {value!r}"
        )
    if not (_EMAIL_RE.search(value) or _URL_RE.search(value)):
        raise InvalidIdentityError(
            f"User agent must include a contact e-mail or URL: {value!r}"
        )
    return value


def parse_forecast(body: str) -> Forecast:
    """Deserialize a response body, raising DeserializationError on mismatch."""
    try:
        return Forecast.model_validate_json(body)
    except ValidationError as e:
        raise DeserializationError(str(e), body) from e


def _expires_at(raw: RawResponse) -> datetime | None:
    value = raw.header("expires")
    expires_at = parse_http_date(value)
    if expires_at is None:
        logger.warning("Missing or invalid Expires header: %r", value)
    return expires_at
