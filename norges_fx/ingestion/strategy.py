"""Abstractions for pluggable rate sources."""

from __future__ import annotations

from typing import Iterable, Protocol


class RateSource(Protocol):
    """Contract for the fetch stage of a lookup.

    Implementations return NOK per single unit for every requested currency
    they know about, and always include the reference currency at ``1.0``.
    """

    def fetch_reference_rates(self, currencies: Iterable[str]) -> dict[str, float]:
        ...  # pragma: no cover - protocol definition


__all__ = ["RateSource"]
