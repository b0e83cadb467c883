from __future__ import annotations

import pytest
import requests

from conftest import sdmx_payload
from norges_fx.denominations import DenominationTable
from norges_fx.errors import InvalidRateValue, MalformedResponse, UpstreamUnavailable
from norges_fx.ingestion.norges_bank import NorgesBankClient


def test_reference_only_request_skips_network(fake_session_factory) -> None:
    session = fake_session_factory(sdmx_payload({"USD": "10.0"}))
    client = NorgesBankClient(session=session)

    assert client.fetch_reference_rates(["NOK"]) == {"NOK": 1.0}
    assert session.calls == []


def test_fetch_batches_currencies_into_one_request(fake_session_factory) -> None:
    session = fake_session_factory(sdmx_payload({"USD": "10.5648", "JPY": "7.2755"}, axis=["JPY", "USD"]))
    client = NorgesBankClient(session=session, timeout=5)

    rates = client.fetch_reference_rates(["USD", "JPY", "USD", "NOK"])

    assert len(session.calls) == 1
    call = session.calls[0]
    assert call["url"] == "https://data.norges-bank.no/api/data/EXR/B.USD+JPY.NOK.SP"
    assert call["params"]["lastNObservations"] == "1"
    assert call["params"]["format"] == "sdmx-json"
    assert call["timeout"] == 5
    assert rates["NOK"] == 1.0
    assert rates["USD"] == 10.5648
    assert rates["JPY"] == pytest.approx(0.072755)


def test_fetch_uses_injected_denominations(fake_session_factory) -> None:
    session = fake_session_factory(sdmx_payload({"SEK": "97.5"}))
    client = NorgesBankClient(session=session, denominations=DenominationTable(units={"SEK": 100}))

    assert client.fetch_reference_rates(["SEK"]) == {"SEK": 0.975, "NOK": 1.0}


def test_unknown_currency_is_simply_absent(fake_session_factory) -> None:
    session = fake_session_factory(sdmx_payload({"USD": "10.0"}))
    client = NorgesBankClient(session=session)

    rates = client.fetch_reference_rates(["USD", "XYZ"])

    assert rates == {"USD": 10.0, "NOK": 1.0}


def test_http_error_status_raises_upstream_unavailable(fake_session_factory) -> None:
    session = fake_session_factory(None, status_code=404)
    client = NorgesBankClient(session=session)

    with pytest.raises(UpstreamUnavailable) as excinfo:
        client.fetch_reference_rates(["XYZ"])

    assert excinfo.value.status == 404
    assert "404" in str(excinfo.value)
    assert isinstance(excinfo.value.cause, requests.HTTPError)


def test_transport_error_raises_upstream_unavailable(fake_session_factory) -> None:
    failure = requests.ConnectionError("connection refused")
    session = fake_session_factory(error=failure)
    client = NorgesBankClient(session=session)

    with pytest.raises(UpstreamUnavailable) as excinfo:
        client.fetch_reference_rates(["USD"])

    assert excinfo.value.status is None
    assert excinfo.value.cause is failure
    assert len(session.calls) == 1


def test_non_json_body_is_malformed(fake_session_factory) -> None:
    session = fake_session_factory(ValueError("Expecting value"))
    client = NorgesBankClient(session=session)

    with pytest.raises(MalformedResponse):
        client.fetch_reference_rates(["USD"])


def test_parser_errors_propagate(fake_session_factory) -> None:
    client = NorgesBankClient(session=fake_session_factory({"data": {}}))
    with pytest.raises(MalformedResponse):
        client.fetch_reference_rates(["USD"])

    client = NorgesBankClient(session=fake_session_factory(sdmx_payload({"USD": "n/a"})))
    with pytest.raises(InvalidRateValue):
        client.fetch_reference_rates(["USD"])


def test_client_only_closes_its_own_session(fake_session_factory) -> None:
    session = fake_session_factory(None)
    with NorgesBankClient(session=session):
        pass
    assert session.closed is False

    with NorgesBankClient() as client:
        owned = client.session
    assert isinstance(owned, requests.Session)


def test_client_sends_headers_without_touching_borrowed_session(fake_session_factory) -> None:
    session = fake_session_factory(sdmx_payload({"USD": "10.0"}))
    client = NorgesBankClient(session=session, user_agent="tests/1.0")

    client.fetch_reference_rates(["USD"])

    assert session.headers == {}
    assert session.calls[0]["headers"] == {"User-Agent": "tests/1.0", "Accept": "application/json"}


def test_unrequested_series_are_dropped(fake_session_factory) -> None:
    session = fake_session_factory(sdmx_payload({"USD": "10.0", "EUR": "11.0", "JPY": "7.0"}))
    client = NorgesBankClient(session=session)

    assert client.fetch_reference_rates(["USD", "NOK"]) == {"USD": 10.0, "NOK": 1.0}


def test_zero_quote_is_rejected_before_division(fake_session_factory) -> None:
    client = NorgesBankClient(session=fake_session_factory(sdmx_payload({"USD": "8.5", "EUR": "0"})))

    with pytest.raises(InvalidRateValue):
        client.fetch_reference_rates(["USD", "EUR"])
