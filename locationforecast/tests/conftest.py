"""Shared test fixtures."""

from collections.abc import Mapping
from pathlib import Path

import pytest
import yaml

from locationforecast.ingest.transport import RawResponse

FIXTURE_DIR = Path(__file__).parent / "fixtures"

USER_AGENT = "test.example.com support@example.com"


class FakeTransport:
    """In-memory HttpTransport that replays canned responses and records calls."""

    def __init__(self, *responses: RawResponse):
        self.responses = list(responses)
        self.calls: list[tuple[str, dict, dict]] = []
        self.closed = False

    async def get(
        self,
        url: str,
        *,
        params: Mapping[str, str],
        headers: Mapping[str, str],
    ) -> RawResponse:
        self.calls.append((url, dict(params), dict(headers)))
        return self.responses.pop(0)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def prague_body() -> str:
    return (FIXTURE_DIR / "complete_prague.json").read_text()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "client": {
            "user_agent": USER_AGENT,
            "timeout_seconds": 5.0,
            "rate_limit": 10,
        }
    }
    path = tmp_path / "client.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def user_agent() -> str:
    return USER_AGENT


@pytest.fixture
def make_transport():
    """Factory for FakeTransport instances."""
    return FakeTransport
