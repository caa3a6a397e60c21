"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from surfcast.config.schema import LoggingConfig, StormGlassConfig, SurfcastConfig


class TestSurfcastConfig:
    def test_defaults(self):
        config = SurfcastConfig()
        assert config.stormglass.source == "noaa"
        assert config.stormglass.end_offset_hours == 24
        assert config.logging.level == "INFO"

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            SurfcastConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            StormGlassConfig(source="noaa", bogus=True)


class TestStormGlassConfig:
    def test_frozen(self):
        config = StormGlassConfig()
        with pytest.raises(ValidationError):
            config.source = "sg"

    def test_empty_source_rejected(self):
        with pytest.raises(ValidationError):
            StormGlassConfig(source="")

    def test_window_must_be_positive(self):
        with pytest.raises(ValidationError):
            StormGlassConfig(end_offset_hours=0)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            StormGlassConfig(timeout=0.0)


class TestLoggingConfig:
    def test_level_validated(self):
        assert LoggingConfig(level="DEBUG").level == "DEBUG"
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")
