"""Error taxonomy for the LocationForecast client.

Every failure raised by this package is a ``ForecastError`` whose ``kind`` is
one member of the closed ``ErrorKind`` set, so callers can either catch the
concrete classes or ``match error.kind`` exhaustively.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    INVALID_IDENTITY = "invalid_identity"
    INVALID_COORDINATE = "invalid_coordinate"
    TRANSPORT = "transport"
    API = "api"
    DESERIALIZATION = "deserialization"


class ForecastError(Exception):
    """Base class for all client errors."""

    kind: ErrorKind


class InvalidIdentityError(ForecastError):
    """The User-Agent identity string is empty or unusable."""

    kind = ErrorKind.INVALID_IDENTITY


class InvalidCoordinateError(ForecastError):
    """Latitude, longitude or altitude is outside the accepted range."""

    kind = ErrorKind.INVALID_COORDINATE


class TransportError(ForecastError):
    """Connection, DNS, TLS or timeout failure below the HTTP layer."""

    kind = ErrorKind.TRANSPORT


class ApiError(ForecastError):
    """Raised when the API answers with an unexpected HTTP status."""

    kind = ErrorKind.API

    def __init__(self, status: int, body: str):
        super().__init__(f"HTTP {status}: {body}")
        self.status = status
        self.body = body


class DeserializationError(ForecastError):
    """The response body does not match the forecast schema."""

    kind = ErrorKind.DESERIALIZATION

    def __init__(self, diagnostic: str, body: str = ""):
        super().__init__(f"Unable to deserialize forecast body: {diagnostic}")
        self.diagnostic = diagnostic
        self.body = body
