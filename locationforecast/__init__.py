"""Client for the MET Norway LocationForecast 2.0 API (the data behind Yr.no).

    async with ForecastClient("myapp.example.com support@example.com") as client:
        response = await client.fetch((50.0880, 14.4207))
        for entry in response.forecast.properties.timeseries:
            print(entry.time, entry.data.instant.details.air_temperature)

Usage terms: https://api.met.no/doc/TermsOfService
"""

from locationforecast.config.loader import load_config
from locationforecast.config.schema import ClientConfig
from locationforecast.errors import (
    ApiError,
    DeserializationError,
    ErrorKind,
    ForecastError,
    InvalidCoordinateError,
    InvalidIdentityError,
    TransportError,
)
from locationforecast.ingest.client import ForecastClient
from locationforecast.ingest.limits import LimitedForecastClient
from locationforecast.ingest.transport import HttpTransport, HttpxTransport, RawResponse
from locationforecast.models.forecast import Forecast
from locationforecast.models.params import Coordinate
from locationforecast.models.response import ForecastResponse

__all__ = [
    "ApiError",
    "ClientConfig",
    "Coordinate",
    "DeserializationError",
    "ErrorKind",
    "Forecast",
    "ForecastClient",
    "ForecastError",
    "ForecastResponse",
    "HttpTransport",
    "HttpxTransport",
    "InvalidCoordinateError",
    "InvalidIdentityError",
    "LimitedForecastClient",
    "RawResponse",
    "TransportError",
    "load_config",
]
