"""Turns StormGlass multi-source hourly records into single-source ForecastPoints."""

import logging
import math
from collections.abc import Iterable

from surfcast.models.forecast import FIELD_ATTRS, FORECAST_FIELDS, ForecastPoint

logger = logging.getLogger(__name__)


def normalize_points(
    hours: Iterable[dict], source: str, *, allow_zero: bool = True
) -> list[ForecastPoint]:
    """Keep the hours that carry every metric for `source`, in input order.

    Incomplete hours are dropped silently; nothing here raises for a bad record.
    """
    points: list[ForecastPoint] = []
    for raw in hours:
        if not is_valid_point(raw, source, allow_zero=allow_zero):
            logger.debug(
                "Dropping incomplete hour %s for source=%s",
                raw.get("time") if isinstance(raw, dict) else raw, source,
            )
            continue
        values = {
            FIELD_ATTRS[name]: float(raw[name][source]) for name in FORECAST_FIELDS
        }
        points.append(ForecastPoint(time=raw["time"], **values))
    return points


def is_valid_point(point: dict, source: str, *, allow_zero: bool = True) -> bool:
    """Check that `point` has a timestamp and a reading from `source` for all metrics.

    With allow_zero=False a reading of 0 counts as missing, which matches the
    legacy truthiness rule.
    """
    if not isinstance(point, dict) or not point.get("time"):
        return False
    for name in FORECAST_FIELDS:
        sources = point.get(name)
        if not isinstance(sources, dict):
            return False
        if not _is_reading(sources.get(source), allow_zero):
            return False
    return True


def _is_reading(value: object, allow_zero: bool) -> bool:
    # bool is an int subclass but never a measurement
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    try:
        number = float(value)
    except OverflowError:
        return False
    if not math.isfinite(number):
        return False
    return allow_zero or number != 0
