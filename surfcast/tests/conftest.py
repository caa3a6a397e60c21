"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from surfcast.config.schema import StormGlassConfig

FIXED_NOW = datetime(2020, 4, 25, 12, 0, tzinfo=UTC)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def stormglass_config() -> StormGlassConfig:
    return StormGlassConfig(
        api_url="https://test-stormglass.example.com/v2",
        api_token="test-token",
        source="noaa",
    )


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def three_hours_payload(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "stormglass_weather_3_hours.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "stormglass": {"api_token": "yaml-token", "source": "sg"},
        "logging": {"level": "DEBUG"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
