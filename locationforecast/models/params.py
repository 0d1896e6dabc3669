"""Request parameters: the coordinate a forecast is requested for."""

import math
from dataclasses import dataclass
from decimal import Decimal

from locationforecast.errors import InvalidCoordinateError

MIN_ALTITUDE_M = -500
MAX_ALTITUDE_M = 9000


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float
    altitude: int | None = None  # metres above sea level

    def __post_init__(self) -> None:
        if not _within(self.latitude, 90.0):
            raise InvalidCoordinateError(f"Invalid latitude: {self.latitude!r}")
        if not _within(self.longitude, 180.0):
            raise InvalidCoordinateError(f"Invalid longitude: {self.longitude!r}")
        if self.altitude is not None and (
            isinstance(self.altitude, bool)
            or not isinstance(self.altitude, int)
            or not MIN_ALTITUDE_M <= self.altitude <= MAX_ALTITUDE_M
        ):
            raise InvalidCoordinateError(f"Invalid altitude: {self.altitude!r}")

    def query_params(self) -> dict[str, str]:
        """Query parameters in the form the API expects, as plain decimals."""
        params = {
            "lat": format_degrees(self.latitude),
            "lon": format_degrees(self.longitude),
        }
        if self.altitude is not None:
            params["altitude"] = str(self.altitude)
        return params


CoordinateLike = Coordinate | tuple[float, float] | tuple[float, float, int]


def to_coordinate(value: CoordinateLike) -> Coordinate:
    """Accept a Coordinate or a (lat, lon[, alt]) tuple."""
    if isinstance(value, Coordinate):
        return value
    try:
        parts = tuple(value)
    except TypeError:
        raise InvalidCoordinateError(f"Not a coordinate: {value!r}") from None
    if len(parts) not in (2, 3):
        raise InvalidCoordinateError(f"Expected (lat, lon[, alt]), got {value!r}")
    return Coordinate(*parts)


def format_degrees(value: float) -> str:
    """Shortest round-tripping decimal, never in exponent notation."""
    return format(Decimal(repr(value)), "f")


def _within(value: float, limit: float) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and -limit <= value <= limit
