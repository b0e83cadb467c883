"""requests-based client for the Norges Bank exchange rate API."""

from __future__ import annotations

from typing import Any, Iterable, Optional, TYPE_CHECKING

import requests

from norges_fx.denominations import DEFAULT_DENOMINATIONS, DenominationTable
from norges_fx.errors import MalformedResponse, UpstreamUnavailable
from norges_fx.ingestion.sdmx_json import parse_sdmx_json
from norges_fx.query import (
    BUSINESS_DAY_FREQUENCY,
    EXCHANGE_RATE_DATASET,
    NORGES_BANK_API_URL,
    REFERENCE_CURRENCY,
    SPOT_SERIES_TYPE,
    build_rate_query,
)
from norges_fx.rates import normalise_rates
from norges_fx.utils.logger import get_logger

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from norges_fx.query import RateQuery

LOGGER = get_logger(__name__)
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "norges-fx/0.1"


class NorgesBankClient:
    """Fetch the latest NOK reference rates with a single batched request."""

    def __init__(
        self,
        *,
        base_url: str = NORGES_BANK_API_URL,
        reference: str = REFERENCE_CURRENCY,
        dataset: str = EXCHANGE_RATE_DATASET,
        frequency: str = BUSINESS_DAY_FREQUENCY,
        series_type: str = SPOT_SERIES_TYPE,
        timeout: Optional[float] = DEFAULT_TIMEOUT,
        denominations: DenominationTable = DEFAULT_DENOMINATIONS,
        session: Optional[requests.Session] = None,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self.base_url = base_url
        self.reference = reference
        self.dataset = dataset
        self.frequency = frequency
        self.series_type = series_type
        self.timeout = timeout
        self.denominations = denominations
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.headers = {"User-Agent": user_agent, "Accept": "application/json"}

    def build_query(self, currencies: Iterable[str]) -> "RateQuery | None":
        return build_rate_query(
            currencies,
            reference=self.reference,
            dataset=self.dataset,
            frequency=self.frequency,
            series_type=self.series_type,
        )

    def fetch_reference_rates(self, currencies: Iterable[str]) -> dict[str, float]:
        """Return NOK per unit for ``currencies`` plus the reference currency."""

        query = self.build_query(currencies)
        if query is None:
            return {self.reference: 1.0}

        payload = self._get_json(query)
        parsed = parse_sdmx_json(payload)
        wanted = {code: rate for code, rate in parsed.rates.items() if code in query.currencies}
        ignored = sorted(set(parsed.rates) - set(wanted))
        if ignored:
            LOGGER.debug("Ignoring unrequested series for %s", ", ".join(ignored))
        rates = normalise_rates(wanted, self.denominations)
        rates[self.reference] = 1.0
        LOGGER.info(
            "Fetched %s NOK reference rate(s) for %s",
            len(wanted),
            ", ".join(query.currencies),
        )
        return rates

    def _get_json(self, query: "RateQuery") -> Any:
        url = query.url(self.base_url)
        LOGGER.debug("Requesting %s with %s", url, query.params)
        try:
            response = self.session.get(
                url, params=query.params, headers=self.headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise UpstreamUnavailable(
                f"Norges Bank API request failed: {exc}", cause=exc
            ) from exc
        self._raise_for_status(response)
        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse("Norges Bank API returned a body that is not JSON") from exc

    @staticmethod
    def _raise_for_status(response: requests.Response) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            raise UpstreamUnavailable(
                f"Norges Bank API request failed with status {status}",
                status=status,
                cause=exc,
            ) from exc

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "NorgesBankClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["NorgesBankClient", "DEFAULT_TIMEOUT", "DEFAULT_USER_AGENT"]
