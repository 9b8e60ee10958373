"""Fetch spot gold/silver prices and print the derived rate table as JSON."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Sequence

from bullion_rates.errors import BullionRatesError
from bullion_rates.ingestion.goldprice import (
    DEFAULT_RATES_URL,
    DEFAULT_TIMEOUT,
    FetchSettings,
    GoldPriceFeed,
    build_rates_url,
    parse_price_feed,
)
from bullion_rates.ingestion.models import RateTable
from bullion_rates.ingestion.strategy import PriceFeedStrategy
from bullion_rates.rates.calculator import aggregate_rates
from bullion_rates.rates.serializer import serialize_rate_table
from bullion_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["build_rate_table", "parse_args", "settings_from_args", "main"]


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be zero or greater")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if not math.isfinite(number) or number <= 0:
        raise argparse.ArgumentTypeError("must be a finite number greater than zero")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument(
        "--currency",
        dest="currencies",
        action="append",
        help="Currency code(s) to request, repeatable or comma separated (default: INR)",
    )
    source_group.add_argument(
        "--url",
        dest="url",
        help=f"Full price feed URL (default: {DEFAULT_RATES_URL})",
    )
    parser.add_argument(
        "--timeout",
        dest="timeout",
        type=_positive_float,
        default=DEFAULT_TIMEOUT,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--insecure",
        dest="verify_tls",
        action="store_false",
        help="Disable TLS certificate verification (not recommended)",
    )
    parser.add_argument(
        "--indent",
        dest="indent",
        type=_non_negative_int,
        default=4,
        help="Indentation used for the JSON output",
    )
    parser.set_defaults(verify_tls=True)
    return parser.parse_args(argv)


def settings_from_args(args: argparse.Namespace) -> FetchSettings:
    if args.url:
        url = args.url
    elif args.currencies:
        url = build_rates_url(args.currencies)
    else:
        url = DEFAULT_RATES_URL
    return FetchSettings(url=url, timeout=args.timeout, verify_tls=args.verify_tls)


def build_rate_table(feed: PriceFeedStrategy) -> RateTable:
    """Run fetch, parse and aggregate against ``feed``."""

    records = parse_price_feed(feed.fetch())
    table = aggregate_rates(records)
    LOGGER.info("Derived rates for %s currencies", len(table))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = settings_from_args(args)
        table = build_rate_table(GoldPriceFeed(settings))
    except (BullionRatesError, ValueError) as exc:
        LOGGER.error("Unable to build rate table: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(serialize_rate_table(table, indent=args.indent) + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
