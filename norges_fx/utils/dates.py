"""Date helpers used when stamping exchange rate results."""

from __future__ import annotations

from datetime import date, datetime, timezone

DATE_FORMAT = "%Y-%m-%d"


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


def today_iso() -> str:
    """Return the current UTC calendar date as ``YYYY-MM-DD``."""

    return _utc_today().strftime(DATE_FORMAT)


__all__ = ["DATE_FORMAT", "today_iso"]
