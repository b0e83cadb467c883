"""Decode SDMX-JSON exchange rate responses from Norges Bank.

Series in the payload are keyed by positional indices rather than currency
codes. The ``BASE_CUR`` series dimension lists the currencies in the order the
service chose, and the second segment of every series key points into that
list. Only the first observation of each series is read because queries always
ask for ``lastNObservations=1``.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

from norges_fx.errors import InvalidRateValue, MalformedResponse
from norges_fx.ingestion.models import ParsedSeries, RawSeriesEntry, SeriesKey

CURRENCY_DIMENSION_ID = "BASE_CUR"


def _series_mapping(payload: Any) -> Mapping[str, Any]:
    try:
        series = payload["data"]["dataSets"][0]["series"]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponse("Invalid response format from Norges Bank API") from exc
    if not isinstance(series, Mapping):
        raise MalformedResponse("Invalid response format from Norges Bank API")
    return series


def extract_currency_axis(payload: Any) -> tuple[str, ...]:
    """Return the ordered currency codes of the ``BASE_CUR`` dimension."""

    try:
        dimensions = payload["data"]["structure"]["dimensions"]["series"]
    except (KeyError, TypeError) as exc:
        raise MalformedResponse("Invalid series structure in API response") from exc
    for dimension in dimensions or ():
        if isinstance(dimension, Mapping) and dimension.get("id") == CURRENCY_DIMENSION_ID:
            values = dimension.get("values")
            if not values:
                break
            try:
                return tuple(str(value["id"]) for value in values)
            except (KeyError, TypeError) as exc:
                raise MalformedResponse("Invalid series structure in API response") from exc
    raise MalformedResponse("Invalid series structure in API response")


def _first_observation(key: str, series: Any) -> RawSeriesEntry:
    observations = series.get("observations") if isinstance(series, Mapping) else None
    if not isinstance(observations, Mapping) or not observations:
        raise MalformedResponse(f"Series {key} has no observations")
    values = next(iter(observations.values()))
    if not isinstance(values, (list, tuple)) or not values:
        raise MalformedResponse(f"Series {key} has an empty observation")
    return RawSeriesEntry(key=SeriesKey.parse(key), observation=values)


def parse_rate_value(value: object) -> float:
    """Convert an observation value to a finite, positive float."""

    try:
        rate = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidRateValue(f"Invalid rate value in API response: {value!r}", value=value) from exc
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidRateValue(f"Invalid rate value in API response: {value!r}", value=value)
    return rate


def parse_sdmx_json(payload: Any) -> ParsedSeries:
    """Decode ``payload`` into the currency axis and raw NOK rates."""

    series = _series_mapping(payload)
    axis = extract_currency_axis(payload)
    parsed = ParsedSeries(axis=axis)
    for key, entry in series.items():
        raw = _first_observation(key, entry)
        position = raw.key.currency_position
        if position >= len(axis):
            raise MalformedResponse(
                f"Series key {key} points at currency {position} but only {len(axis)} are listed"
            )
        parsed.rates[axis[position]] = parse_rate_value(raw.observation[0])
    return parsed


__all__ = ["CURRENCY_DIMENSION_ID", "extract_currency_axis", "parse_rate_value", "parse_sdmx_json"]
