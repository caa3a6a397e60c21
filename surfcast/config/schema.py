"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class StormGlassConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    api_url: str = "https://api.stormglass.io/v2"
    api_token: str = ""
    source: str = Field(default="noaa", min_length=1)
    end_offset_hours: int = Field(default=24, ge=1)
    timeout: float = Field(default=30.0, gt=0.0)
    # Legacy behaviour: treat a 0 reading as missing
    drop_zero_values: bool = False


class LoggingConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    level: LogLevel = LogLevel.INFO


class SurfcastConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    stormglass: StormGlassConfig = StormGlassConfig()
    logging: LoggingConfig = LoggingConfig()
