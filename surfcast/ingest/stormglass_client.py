"""StormGlass point-forecast API client."""

import json
import logging
from datetime import timedelta

import httpx

from surfcast.config.schema import StormGlassConfig
from surfcast.errors import ClientRequestError, StormGlassResponseError
from surfcast.ingest.normalizer import normalize_points
from surfcast.models.common import Clock, utc_now
from surfcast.models.forecast import FORECAST_FIELDS, ForecastPoint

logger = logging.getLogger(__name__)


class StormGlassClient:
    """Fetches hourly marine forecasts for a coordinate from one StormGlass source.

    Pass an `httpx.AsyncClient` to share its connection pool across calls;
    otherwise each call opens and closes its own client. The instance holds
    only immutable configuration, so calls may run concurrently.
    """

    def __init__(
        self,
        config: StormGlassConfig,
        http: httpx.AsyncClient | None = None,
        clock: Clock = utc_now,
    ):
        self.config = config
        self.http = http
        self.clock = clock

    @property
    def url(self) -> str:
        return f"{self.config.api_url.rstrip('/')}/weather/point"

    def _headers(self) -> dict[str, str]:
        return {"Authorization": self.config.api_token}

    def build_params(self, lat: float, lng: float) -> dict[str, str | int | float]:
        """Query parameters for one point request, with `end` relative to now."""
        end = self.clock() + timedelta(hours=self.config.end_offset_hours)
        return {
            "params": ",".join(FORECAST_FIELDS),
            "source": self.config.source,
            "end": int(end.timestamp()),
            "lat": lat,
            "lng": lng,
        }

    async def fetch_points(self, lat: float, lng: float) -> list[ForecastPoint]:
        """Fetch and normalize the forecast for (lat, lng).

        Raises:
            StormGlassResponseError: StormGlass answered with an error status.
            ClientRequestError: anything else went wrong, including timeouts
                and payloads that are not a StormGlass forecast.
        """
        try:
            hours = await self._get_hours(lat, lng)
            points = normalize_points(
                hours,
                self.config.source,
                allow_zero=not self.config.drop_zero_values,
            )
        except httpx.HTTPStatusError as e:
            body = _serialize_body(e.response)
            logger.error(
                "StormGlass returned %d for lat=%s lng=%s: %s",
                e.response.status_code, lat, lng, body,
            )
            raise StormGlassResponseError(body, e.response.status_code) from e
        except Exception as e:
            logger.error("StormGlass request failed for lat=%s lng=%s: %s", lat, lng, e)
            raise ClientRequestError(str(e)) from e

        logger.debug(
            "StormGlass lat=%s lng=%s: kept %d of %d hours",
            lat, lng, len(points), len(hours),
        )
        return points

    async def _get_hours(self, lat: float, lng: float) -> list[dict]:
        params = self.build_params(lat, lng)
        if self.http is not None:
            resp = await self.http.get(self.url, params=params, headers=self._headers())
        else:
            async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                resp = await client.get(self.url, params=params, headers=self._headers())
        resp.raise_for_status()
        data = resp.json()
        hours = data.get("hours") if isinstance(data, dict) else None
        if not isinstance(hours, list):
            raise ValueError("response has no 'hours' list")
        return hours


def _serialize_body(resp: httpx.Response) -> str:
    try:
        return json.dumps(resp.json())
    except ValueError:
        return resp.text
