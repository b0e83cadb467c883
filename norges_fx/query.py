"""Build SDMX queries against the Norges Bank exchange rate dataset."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

NORGES_BANK_API_URL = "https://data.norges-bank.no/api/data"
REFERENCE_CURRENCY = "NOK"
EXCHANGE_RATE_DATASET = "EXR"
BUSINESS_DAY_FREQUENCY = "B"
SPOT_SERIES_TYPE = "SP"


@dataclass(frozen=True, slots=True)
class RateQuery:
    """One batched request for the latest NOK rate of several currencies."""

    currencies: tuple[str, ...]
    reference: str = REFERENCE_CURRENCY
    dataset: str = EXCHANGE_RATE_DATASET
    frequency: str = BUSINESS_DAY_FREQUENCY
    series_type: str = SPOT_SERIES_TYPE

    @property
    def path(self) -> str:
        """SDMX series key selector, e.g. ``B.USD+EUR.NOK.SP``."""

        joined = "+".join(self.currencies)
        return f"{self.frequency}.{joined}.{self.reference}.{self.series_type}"

    @property
    def params(self) -> dict[str, str]:
        return {
            "format": "sdmx-json",
            "lastNObservations": "1",
            "locale": "en",
        }

    def url(self, base_url: str = NORGES_BANK_API_URL) -> str:
        return f"{base_url.rstrip('/')}/{self.dataset}/{self.path}"


def build_rate_query(
    currencies: Iterable[str],
    *,
    reference: str = REFERENCE_CURRENCY,
    dataset: str = EXCHANGE_RATE_DATASET,
    frequency: str = BUSINESS_DAY_FREQUENCY,
    series_type: str = SPOT_SERIES_TYPE,
) -> RateQuery | None:
    """Return the query covering ``currencies`` or ``None`` if nothing needs fetching.

    The reference currency is always worth 1 so it never goes on the wire.
    Duplicates are dropped while keeping the order they were first requested in.
    """

    wanted = tuple(dict.fromkeys(code for code in currencies if code != reference))
    if not wanted:
        return None
    return RateQuery(
        currencies=wanted,
        reference=reference,
        dataset=dataset,
        frequency=frequency,
        series_type=series_type,
    )


__all__ = [
    "NORGES_BANK_API_URL",
    "REFERENCE_CURRENCY",
    "EXCHANGE_RATE_DATASET",
    "BUSINESS_DAY_FREQUENCY",
    "SPOT_SERIES_TYPE",
    "RateQuery",
    "build_rate_query",
]
