from __future__ import annotations

from typing import Any

import pytest
import requests


def sdmx_payload(quotes: dict[str, str], *, axis: list[str] | None = None) -> dict[str, Any]:
    """Build a minimal SDMX-JSON EXR response.

    ``quotes`` maps currency -> raw observation string; ``axis`` overrides the
    order the currencies appear in the BASE_CUR dimension.
    """

    axis = axis or list(quotes)
    series = {
        f"0:{axis.index(code)}:0:0": {"observations": {"0": [value]}}
        for code, value in quotes.items()
    }
    return {
        "data": {
            "dataSets": [{"series": series}],
            "structure": {
                "dimensions": {
                    "series": [
                        {"id": "FREQ", "values": [{"id": "B"}]},
                        {"id": "BASE_CUR", "values": [{"id": code} for code in axis]},
                        {"id": "QUOTE_CUR", "values": [{"id": "NOK"}]},
                        {"id": "TENOR", "values": [{"id": "SP"}]},
                    ]
                }
            },
        }
    }


class FakeResponse:
    def __init__(self, payload: Any = None, *, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, response: FakeResponse | Exception) -> None:
        self.response = response
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def get(self, url: str, *, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def close(self) -> None:
        self.closed = True


class StaticRateSource:
    """Rate source returning a fixed NOK rate table."""

    def __init__(self, rates: dict[str, float]) -> None:
        self.rates = rates
        self.requests: list[list[str]] = []

    def fetch_reference_rates(self, currencies):
        wanted = list(currencies)
        self.requests.append(wanted)
        return {code: rate for code, rate in self.rates.items() if code in wanted or code == "NOK"}

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        return None


@pytest.fixture
def fake_session_factory():
    def _make(payload: Any = None, *, status_code: int = 200, error: Exception | None = None):
        return FakeSession(error if error is not None else FakeResponse(payload, status_code=status_code))

    return _make
