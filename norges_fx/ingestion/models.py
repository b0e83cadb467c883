"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from norges_fx.errors import MalformedResponse

# Position of the base currency dimension inside an EXR series key
# (FREQ:BASE_CUR:QUOTE_CUR:TENOR).
CURRENCY_KEY_POSITION = 1


@dataclass(frozen=True, slots=True)
class SeriesKey:
    """Decoded SDMX-JSON series key such as ``"0:1:0:0"``.

    Each segment is an index into the value list of the matching series
    dimension, so the key only means something next to the response structure.
    """

    positions: tuple[int, ...]

    @classmethod
    def parse(cls, raw: str) -> "SeriesKey":
        segments = raw.split(":")
        if len(segments) <= CURRENCY_KEY_POSITION:
            raise MalformedResponse(f"Series key {raw!r} has no currency position")
        try:
            positions = tuple(int(segment) for segment in segments)
        except ValueError as exc:
            raise MalformedResponse(f"Series key {raw!r} is not a list of integers") from exc
        if any(position < 0 for position in positions):
            raise MalformedResponse(f"Series key {raw!r} contains a negative position")
        return cls(positions=positions)

    @property
    def currency_position(self) -> int:
        return self.positions[CURRENCY_KEY_POSITION]

    def __str__(self) -> str:
        return ":".join(str(position) for position in self.positions)


@dataclass(frozen=True, slots=True)
class RawSeriesEntry:
    """A series key together with the raw values of its first observation."""

    key: SeriesKey
    observation: Sequence[object]


@dataclass(slots=True)
class ParsedSeries:
    """Currency axis and raw, not yet normalised, NOK rates from one response."""

    axis: tuple[str, ...]
    rates: dict[str, float] = field(default_factory=dict)


__all__ = ["CURRENCY_KEY_POSITION", "SeriesKey", "RawSeriesEntry", "ParsedSeries"]
