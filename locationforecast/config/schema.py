"""Pydantic v2 configuration schema for the forecast client."""

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://api.met.no/weatherapi/locationforecast/2.0/complete"


class ClientConfig(BaseModel):
    model_config = {"extra": "forbid"}

    user_agent: str = Field(min_length=1)
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    # Upstream terms: at most 20 requests per second per application.
    concurrency_limit: int = Field(default=50, ge=1)
    rate_limit: int = Field(default=20, ge=1)
    rate_period_seconds: float = Field(default=1.0, gt=0.0)
