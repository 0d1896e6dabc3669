"""Pydantic models for the LocationForecast 2.0 "complete" response body.

Field names follow the upstream documentation at
https://api.met.no/weatherapi/locationforecast/2.0/documentation. Unknown keys
are ignored and every variable the API may omit is optional.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, model_validator

FROZEN = {"frozen": True, "extra": "ignore"}


class Coordinates(BaseModel):
    model_config = FROZEN

    longitude: float
    latitude: float
    altitude: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _from_geojson(cls, value: Any) -> Any:
        # GeoJSON position: [lon, lat] or [lon, lat, alt]
        if isinstance(value, (list, tuple)):
            if len(value) not in (2, 3):
                raise ValueError(
                    f"expected [longitude, latitude, altitude?], got {len(value)} values"
                )
            return dict(zip(("longitude", "latitude", "altitude"), value))
        return value


class Geometry(BaseModel):
    model_config = FROZEN

    type: str
    coordinates: Coordinates


class Units(BaseModel):
    model_config = FROZEN

    air_pressure_at_sea_level: str | None = None
    air_temperature: str | None = None
    air_temperature_max: str | None = None
    air_temperature_min: str | None = None
    air_temperature_percentile_10: str | None = None
    air_temperature_percentile_90: str | None = None
    cloud_area_fraction: str | None = None
    cloud_area_fraction_high: str | None = None
    cloud_area_fraction_low: str | None = None
    cloud_area_fraction_medium: str | None = None
    dew_point_temperature: str | None = None
    fog_area_fraction: str | None = None
    precipitation_amount: str | None = None
    precipitation_amount_max: str | None = None
    precipitation_amount_min: str | None = None
    probability_of_precipitation: str | None = None
    probability_of_thunder: str | None = None
    relative_humidity: str | None = None
    ultraviolet_index_clear_sky: str | None = None
    ultraviolet_index_clear_sky_max: str | None = None
    wind_from_direction: str | None = None
    wind_speed: str | None = None
    wind_speed_of_gust: str | None = None
    wind_speed_percentile_10: str | None = None
    wind_speed_percentile_90: str | None = None


class Meta(BaseModel):
    model_config = FROZEN

    updated_at: datetime
    units: Units


class InstantDetails(BaseModel):
    model_config = FROZEN

    air_pressure_at_sea_level: float | None = None
    air_temperature: float | None = None
    air_temperature_percentile_10: float | None = None
    air_temperature_percentile_90: float | None = None
    cloud_area_fraction: float | None = None
    cloud_area_fraction_high: float | None = None
    cloud_area_fraction_low: float | None = None
    cloud_area_fraction_medium: float | None = None
    dew_point_temperature: float | None = None
    fog_area_fraction: float | None = None
    relative_humidity: float | None = None
    ultraviolet_index_clear_sky: float | None = None
    wind_from_direction: float | None = None
    wind_speed: float | None = None
    wind_speed_of_gust: float | None = None
    wind_speed_percentile_10: float | None = None
    wind_speed_percentile_90: float | None = None


class Instant(BaseModel):
    model_config = FROZEN

    details: InstantDetails


class Summary(BaseModel):
    model_config = FROZEN

    symbol_code: str


class SummaryDetails(BaseModel):
    model_config = FROZEN

    air_temperature_max: float | None = None
    air_temperature_min: float | None = None
    precipitation_amount: float | None = None
    precipitation_amount_max: float | None = None
    precipitation_amount_min: float | None = None
    probability_of_precipitation: float | None = None
    probability_of_thunder: float | None = None
    ultraviolet_index_clear_sky_max: float | None = None


class NextHours(BaseModel):
    model_config = FROZEN

    summary: Summary
    # Documented as required, but the API leaves it out for some periods.
    details: SummaryDetails | None = None


class Data(BaseModel):
    model_config = FROZEN

    instant: Instant
    next_1_hours: NextHours | None = None
    next_6_hours: NextHours | None = None
    next_12_hours: NextHours | None = None


class TimeSeries(BaseModel):
    model_config = FROZEN

    time: datetime
    data: Data


class Properties(BaseModel):
    model_config = FROZEN

    meta: Meta
    timeseries: tuple[TimeSeries, ...]


class Forecast(BaseModel):
    """Top-level GeoJSON feature returned by the API."""

    model_config = FROZEN

    type: str
    geometry: Geometry
    properties: Properties
