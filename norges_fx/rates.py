"""Pure rate arithmetic: denomination normalisation and cross rates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

from norges_fx.denominations import DEFAULT_DENOMINATIONS, DenominationTable
from norges_fx.errors import CurrencyUnavailable
from norges_fx.utils.dates import today_iso


@dataclass(frozen=True, slots=True)
class ExchangeRate:
    """How many ``target_currency`` units one ``base_currency`` unit buys."""

    base_currency: str
    target_currency: str
    date: str
    rate: float

    def as_dict(self) -> Dict[str, Any]:
        """Return the camelCase payload handed to tool clients."""

        return {
            "baseCurrency": self.base_currency,
            "targetCurrency": self.target_currency,
            "date": self.date,
            "rate": self.rate,
        }


def normalise_rates(
    raw_rates: Mapping[str, float],
    table: DenominationTable = DEFAULT_DENOMINATIONS,
) -> dict[str, float]:
    """Express every raw quote as NOK per single unit of the currency."""

    return {code: rate / table.unit_for(code) for code, rate in raw_rates.items()}


def cross_rate(rates: Mapping[str, float], base: str, target: str) -> float:
    """Derive ``base``/``target`` from two NOK reference rates.

    With USD/NOK and EUR/NOK known, USD/EUR = (USD/NOK) / (EUR/NOK).
    """

    missing = [code for code in dict.fromkeys((base, target)) if code not in rates]
    if missing:
        raise CurrencyUnavailable(missing)
    return rates[base] / rates[target]


def assemble_result(base: str, target: str, rate: float, date: str | None = None) -> ExchangeRate:
    return ExchangeRate(
        base_currency=base,
        target_currency=target,
        date=date or today_iso(),
        rate=rate,
    )


def compute_exchange_rate(
    rates: Mapping[str, float],
    base: str,
    target: str,
    date: str | None = None,
) -> ExchangeRate:
    """Compute stage of a lookup: no I/O, only the already fetched rates."""

    return assemble_result(base, target, cross_rate(rates, base, target), date)


__all__ = [
    "ExchangeRate",
    "normalise_rates",
    "cross_rate",
    "assemble_result",
    "compute_exchange_rate",
]
