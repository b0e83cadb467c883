"""Exceptions raised while resolving exchange rates."""

from __future__ import annotations

from typing import Iterable


class ExchangeRateError(RuntimeError):
    """Base class for every failure surfaced by :mod:`norges_fx`.

    ``kind`` is a stable identifier so callers can branch on the failure
    without inspecting the message.
    """

    kind = "exchange_rate_error"


class UpstreamUnavailable(ExchangeRateError):
    """Norges Bank could not be reached or answered with a non-success status."""

    kind = "upstream_unavailable"

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.cause = cause


class MalformedResponse(ExchangeRateError):
    """The SDMX-JSON payload does not have the expected structure."""

    kind = "malformed_response"


class InvalidRateValue(ExchangeRateError):
    """An observation could not be read as a finite number."""

    kind = "invalid_rate_value"

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class CurrencyUnavailable(ExchangeRateError):
    """A requested currency has no quote in the resolved reference rates."""

    kind = "currency_unavailable"

    def __init__(self, currencies: Iterable[str]) -> None:
        self.currencies = tuple(currencies)
        joined = ", ".join(self.currencies)
        super().__init__(f"Currency not available from Norges Bank API: {joined}")


__all__ = [
    "ExchangeRateError",
    "UpstreamUnavailable",
    "MalformedResponse",
    "InvalidRateValue",
    "CurrencyUnavailable",
]
