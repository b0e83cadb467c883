"""The ``exchange_rate`` tool as exposed to MCP clients.

The handler never raises for lookup failures: every error comes back as a
single text message with ``isError`` set, which is what tool-calling clients
expect.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping

from norges_fx import fetch_exchange_rate
from norges_fx.errors import ExchangeRateError
from norges_fx.ingestion.strategy import RateSource
from norges_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

EXCHANGE_RATE_TOOL: Dict[str, Any] = {
    "name": "exchange_rate",
    "description": "Get the exchange rate between two currencies using Norges Bank reference rates",
    "inputSchema": {
        "type": "object",
        "properties": {
            "baseCurrency": {
                "type": "string",
                "description": "The base currency code (e.g., NOK, USD)",
            },
            "targetCurrency": {
                "type": "string",
                "description": "The target currency code (e.g., EUR, USD)",
            },
            "date": {
                "type": "string",
                "description": "Optional date in YYYY-MM-DD format. Defaults to latest available rate.",
            },
        },
        "required": ["baseCurrency", "targetCurrency"],
    },
}

ERROR_PREFIX = "Error fetching exchange rate"


class ToolArgumentError(ValueError):
    """Tool arguments are missing or have the wrong type."""


def _text_result(text: str, *, is_error: bool = False) -> Dict[str, Any]:
    result: Dict[str, Any] = {"content": [{"type": "text", "text": text}]}
    if is_error:
        result["isError"] = True
    return result


def _read_arguments(arguments: Mapping[str, Any]) -> tuple[str, str, str | None]:
    values: list[str] = []
    for name in ("baseCurrency", "targetCurrency"):
        value = arguments.get(name)
        if value is None:
            raise ToolArgumentError(f"Missing required argument: {name}")
        if not isinstance(value, str):
            raise ToolArgumentError(f"Argument {name} must be a string")
        values.append(value)
    date = arguments.get("date")
    if date is not None and not isinstance(date, str):
        raise ToolArgumentError("Argument date must be a string")
    return values[0], values[1], date


def handle_exchange_rate(
    arguments: Mapping[str, Any],
    *,
    source: RateSource | None = None,
) -> Dict[str, Any]:
    """Run an ``exchange_rate`` call and wrap the outcome as tool content."""

    try:
        base, target, date = _read_arguments(arguments)
        result = fetch_exchange_rate(base, target, date, source=source)
    except (ExchangeRateError, ToolArgumentError) as exc:
        LOGGER.warning("exchange_rate failed: %s", exc)
        return _text_result(f"{ERROR_PREFIX}: {exc}", is_error=True)
    return _text_result(json.dumps(result.as_dict(), indent=2))


__all__ = ["EXCHANGE_RATE_TOOL", "ERROR_PREFIX", "ToolArgumentError", "handle_exchange_rate"]
