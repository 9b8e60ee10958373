"""Public interface for the bullion_rates package."""

from __future__ import annotations

from importlib import metadata as importlib_metadata
from typing import Any, Dict, Iterable

import requests

from bullion_rates.errors import BullionRatesError, InvalidRecordError, ParseError, TransportError
from bullion_rates.ingestion.goldprice import (
    DEFAULT_RATES_URL,
    DEFAULT_TIMEOUT,
    FetchSettings,
    GoldPriceFeed,
    build_rates_url,
    fetch_price_feed,
    parse_price_feed,
)
from bullion_rates.ingestion.models import CurrencyEntry, PriceRecord, RateTable, rate_table_as_dict
from bullion_rates.ingestion.strategy import PriceFeedStrategy
from bullion_rates.rates.calculator import aggregate_rates, calculate_rates
from bullion_rates.rates.serializer import serialize_rate_table
from bullion_rates.utils.currencies import SUPPORTED_CURRENCIES

__all__ = [
    "__version__",
    "BullionRates",
    "BullionRatesError",
    "TransportError",
    "ParseError",
    "InvalidRecordError",
    "FetchSettings",
    "PriceRecord",
    "CurrencyEntry",
    "RateTable",
    "SUPPORTED_CURRENCIES",
    "build_rates_url",
    "fetch_price_feed",
    "parse_price_feed",
    "calculate_rates",
    "aggregate_rates",
    "serialize_rate_table",
]

try:
    __version__ = importlib_metadata.version("bullion-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "1.0.0"


class BullionRates:
    """Package facade that wires the price feed to the rate calculator."""

    __slots__ = ("settings", "feed")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        currencies: str | Iterable[str] | None = None,
        *,
        url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_tls: bool = True,
        session: requests.Session | None = None,
        feed: PriceFeedStrategy | None = None,
    ) -> None:
        """Configure where prices come from.

        ``currencies`` builds a goldprice.org URL (``["USD", "INR"]`` or
        ``"USD,INR"``); ``url`` points at a feed directly. Supplying both is an
        error. A custom ``feed`` replaces the HTTP fetch entirely, which keeps
        the calculator testable offline.
        """

        if currencies is not None and url is not None:
            raise ValueError("Pass either currencies or url, not both")
        if currencies is not None:
            resolved_url = build_rates_url(currencies)
        else:
            resolved_url = url or DEFAULT_RATES_URL
        self.settings = FetchSettings(url=resolved_url, timeout=timeout, verify_tls=verify_tls)
        self.feed: PriceFeedStrategy = feed or GoldPriceFeed(self.settings, session=session)

    def records(self) -> list[PriceRecord]:
        """Fetch the feed once and return its parsed price records."""

        return parse_price_feed(self.feed.fetch())

    def rate_table(self) -> RateTable:
        """Fetch the feed once and return the derived rate table."""

        return aggregate_rates(self.records())

    def rates(self) -> Dict[str, Any]:
        """Return the rate table as plain nested dictionaries."""

        return rate_table_as_dict(self.rate_table())

    def to_json(self, *, indent: int = 4) -> str:
        """Return the rate table as pretty-printed JSON text."""

        return serialize_rate_table(self.rate_table(), indent=indent)
