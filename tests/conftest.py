"""Shared fixtures: sample device pools and an API client over a static catalog."""

from pathlib import Path
from typing import Dict, List

import pytest
from fastapi.testclient import TestClient

from device_api.app import create_app
from device_api.config import ServerConfig
from device_api.services import StaticCatalogProvider
from device_api.state import set_state

REPO_ROOT = Path(__file__).resolve().parent.parent
DEVICES_PATH = REPO_ROOT / "datasets" / "devices.json"


def make_devices(n: int) -> List[Dict]:
    return [
        {"Brand": f"Brand{i}", "Model": f"Model{i}", "Price": 10000 + i * 1000, "RAM": "8 GB"}
        for i in range(n)
    ]


@pytest.fixture
def devices() -> List[Dict]:
    return make_devices(12)


@pytest.fixture
def make_client():
    """Build a TestClient for an app whose catalog is the given provider."""

    def _make(provider, **config_overrides) -> TestClient:
        config = ServerConfig(**config_overrides)
        return TestClient(create_app(config=config, catalog_provider=provider))

    yield _make
    set_state(None)


@pytest.fixture
def client(make_client, devices) -> TestClient:
    return make_client(StaticCatalogProvider(devices))
