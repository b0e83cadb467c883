"""Expose the ``exchange_rate`` tool over MCP stdio.

Requires the optional ``server`` extra (``pip install norges-fx[server]``).
stdout carries the protocol stream, so all logging goes to stderr.
"""

from __future__ import annotations

import argparse
from typing import Any, Callable, Sequence

from norges_fx.ingestion.norges_bank import DEFAULT_TIMEOUT, NorgesBankClient
from norges_fx.query import NORGES_BANK_API_URL
from norges_fx.tool import EXCHANGE_RATE_TOOL, handle_exchange_rate
from norges_fx.utils.logger import get_logger, set_log_level

LOGGER = get_logger(__name__)
SERVER_NAME = "Exchange Rate MCP"


def build_server(source_factory: Callable[[], Any] | None = None):
    """Create a FastMCP server with the ``exchange_rate`` tool registered.

    ``source_factory`` returns a context manager yielding a rate source; a new
    one is opened for every tool call.
    """

    from mcp.server.fastmcp import FastMCP
    from mcp.server.fastmcp.exceptions import ToolError

    factory = source_factory or NorgesBankClient
    server = FastMCP(SERVER_NAME)

    @server.tool(name=EXCHANGE_RATE_TOOL["name"], description=EXCHANGE_RATE_TOOL["description"])
    def exchange_rate(baseCurrency: str, targetCurrency: str, date: str | None = None) -> str:
        arguments = {"baseCurrency": baseCurrency, "targetCurrency": targetCurrency, "date": date}
        with factory() as source:
            result = handle_exchange_rate(arguments, source=source)
        text = result["content"][0]["text"]
        if result.get("isError"):
            raise ToolError(text)
        return text

    return server


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="norges-fx-mcp", description=__doc__)
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds (default: %(default)s)",
    )
    parser.add_argument("--base-url", default=NORGES_BANK_API_URL, help="Norges Bank API root")
    parser.add_argument("--log-level", default="info", help="Logging level (default: %(default)s)")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    set_log_level(args.log_level)

    def _client() -> NorgesBankClient:
        return NorgesBankClient(base_url=args.base_url, timeout=args.timeout)

    server = build_server(_client)
    LOGGER.info("%s server starting...", SERVER_NAME)
    server.run("stdio")


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
