"""StormGlass forecast data models."""

from dataclasses import dataclass

# Order matters: it is also the order of the `params` query parameter.
FORECAST_FIELDS: tuple[str, ...] = (
    "swellDirection",
    "swellHeight",
    "swellPeriod",
    "waveDirection",
    "waveHeight",
    "windDirection",
    "windSpeed",
)

# Provider camelCase name -> ForecastPoint attribute
FIELD_ATTRS: dict[str, str] = {
    "swellDirection": "swell_direction",
    "swellHeight": "swell_height",
    "swellPeriod": "swell_period",
    "waveDirection": "wave_direction",
    "waveHeight": "wave_height",
    "windDirection": "wind_direction",
    "windSpeed": "wind_speed",
}


@dataclass(frozen=True)
class ForecastPoint:
    time: str  # ISO 8601, as sent by the provider
    wave_height: float
    swell_direction: float
    swell_height: float
    swell_period: float
    wave_direction: float
    wind_direction: float
    wind_speed: float

    def to_dict(self) -> dict[str, str | float]:
        """Serialize using the provider's camelCase field names."""
        data: dict[str, str | float] = {"time": self.time}
        for field_name, attr in FIELD_ATTRS.items():
            data[field_name] = getattr(self, attr)
        return data
