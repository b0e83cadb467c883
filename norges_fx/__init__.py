"""Public interface for the norges_fx package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Iterable

from norges_fx.denominations import DEFAULT_DENOMINATIONS, DenominationTable
from norges_fx.errors import (
    CurrencyUnavailable,
    ExchangeRateError,
    InvalidRateValue,
    MalformedResponse,
    UpstreamUnavailable,
)
from norges_fx.ingestion.norges_bank import NorgesBankClient
from norges_fx.ingestion.strategy import RateSource
from norges_fx.rates import ExchangeRate, compute_exchange_rate

__all__ = [
    "__version__",
    "CurrencyUnavailable",
    "DEFAULT_DENOMINATIONS",
    "DenominationTable",
    "ExchangeRate",
    "ExchangeRateError",
    "InvalidRateValue",
    "MalformedResponse",
    "NorgesBankClient",
    "RateSource",
    "UpstreamUnavailable",
    "fetch_exchange_rate",
    "fetch_reference_rates",
]

try:
    __version__ = importlib_metadata.version("norges-fx")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


def fetch_reference_rates(
    currencies: Iterable[str],
    *,
    source: RateSource | None = None,
) -> dict[str, float]:
    """Fetch stage: NOK per unit for ``currencies`` in one batched call.

    Without ``source`` a fresh :class:`NorgesBankClient` is created and closed
    for this call only, so concurrent lookups share nothing.
    """

    if source is not None:
        return source.fetch_reference_rates(currencies)
    with NorgesBankClient() as client:
        return client.fetch_reference_rates(currencies)


def fetch_exchange_rate(
    base_currency: str,
    target_currency: str,
    date: str | None = None,
    *,
    source: RateSource | None = None,
) -> ExchangeRate:
    """Return the latest ``base_currency``/``target_currency`` rate.

    ``date`` is echoed on the result but does not select an observation;
    Norges Bank is always asked for its latest published rate.
    """

    rates = fetch_reference_rates([base_currency, target_currency], source=source)
    return compute_exchange_rate(rates, base_currency, target_currency, date)
