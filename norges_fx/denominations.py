"""Reference denominations for currencies Norges Bank quotes per 100 units."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Each currency is quoted per N units where N is the value below. Anything
# missing from the table is quoted per single unit.
_PER_HUNDRED: dict[str, int] = {
    "JPY": 100,
    "KRW": 100,
    "IDR": 100,
}


@dataclass(frozen=True, slots=True)
class DenominationTable:
    """Read-only lookup of the quoting unit used for each currency."""

    units: Mapping[str, int] = field(default_factory=lambda: dict(_PER_HUNDRED))

    def __post_init__(self) -> None:
        for code, unit in self.units.items():
            if not isinstance(unit, int) or unit <= 0:
                raise ValueError(f"Denomination for {code} must be a positive integer, got {unit!r}")
        object.__setattr__(self, "units", MappingProxyType(dict(self.units)))

    def unit_for(self, currency: str) -> int:
        """Return the quoting unit for ``currency`` (1 when not listed)."""

        return self.units.get(currency, 1)


DEFAULT_DENOMINATIONS = DenominationTable()


__all__ = ["DenominationTable", "DEFAULT_DENOMINATIONS"]
