"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import respx

from weather.nws import NWS_API_BASE

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def nws():
    """Mocked NWS API; any request without a matching route fails the test."""
    with respx.mock(base_url=NWS_API_BASE, assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def alerts_ca() -> dict:
    return load_fixture("alerts_ca.json")


@pytest.fixture
def points_sf() -> dict:
    return load_fixture("points_sf.json")


@pytest.fixture
def forecast_sf() -> dict:
    return load_fixture("forecast_sf.json")
