"""Look up an exchange rate from the command line."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Sequence

from norges_fx import fetch_exchange_rate
from norges_fx.errors import ExchangeRateError
from norges_fx.ingestion.norges_bank import DEFAULT_TIMEOUT, NorgesBankClient
from norges_fx.query import NORGES_BANK_API_URL
from norges_fx.utils.logger import set_log_level


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="norges-fx", description=__doc__)
    parser.add_argument("base", help="Base currency code (e.g. USD)")
    parser.add_argument("target", help="Target currency code (e.g. EUR)")
    parser.add_argument(
        "--date",
        help="Date to stamp on the result (YYYY-MM-DD). The latest rate is always used.",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds (default: %(default)s)",
    )
    parser.add_argument("--base-url", default=NORGES_BANK_API_URL, help="Norges Bank API root")
    parser.add_argument("--log-level", default="warning", help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    set_log_level(args.log_level)
    try:
        with NorgesBankClient(base_url=args.base_url, timeout=args.timeout) as client:
            result = fetch_exchange_rate(args.base, args.target, args.date, source=client)
    except ExchangeRateError as exc:
        print(f"Error fetching exchange rate: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(json.dumps(result.as_dict(), indent=2))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
