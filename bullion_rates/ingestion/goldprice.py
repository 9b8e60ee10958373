"""Fetch and parse the goldprice.org ``dbXRates`` spot price feed."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable
from urllib.parse import urlparse

import requests

from bullion_rates.errors import ParseError, TransportError
from bullion_rates.ingestion.models import PriceRecord
from bullion_rates.utils.currencies import normalise_currencies
from bullion_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

GOLDPRICE_BASE_URL = "https://data-asg.goldprice.org/dbXRates"
DEFAULT_CURRENCIES: tuple[str, ...] = ("INR",)
DEFAULT_RATES_URL = f"{GOLDPRICE_BASE_URL}/{','.join(DEFAULT_CURRENCIES)}"
DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "bullion-rates/1.0"


@dataclass(slots=True)
class FetchSettings:
    """How the price feed should be requested."""

    url: str = DEFAULT_RATES_URL
    timeout: float = DEFAULT_TIMEOUT
    verify_tls: bool = True
    user_agent: str = DEFAULT_USER_AGENT


def build_rates_url(
    currencies: str | Iterable[str], *, base_url: str = GOLDPRICE_BASE_URL
) -> str:
    """Return the feed URL for ``currencies`` (``.../dbXRates/USD,INR``)."""

    codes = normalise_currencies(currencies)
    return f"{base_url.rstrip('/')}/{','.join(codes)}"


def _validate_url(url: str) -> None:
    parsed = urlparse(url)
    if parsed.scheme.lower() != "https" or not parsed.netloc:
        raise ValueError(f"Price feed URL must be an https:// URL with a host: {url!r}")


def _raise_with_context(response: requests.Response, url: str) -> None:
    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        status = response.status_code
        hint = " The provider may be rate limiting automated clients." if status in {403, 429} else ""
        raise TransportError(f"Price feed responded with HTTP {status} for {url}.{hint}") from exc


def fetch_price_feed(
    url: str = DEFAULT_RATES_URL,
    *,
    session: requests.Session | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    verify_tls: bool = True,
    user_agent: str = DEFAULT_USER_AGENT,
) -> bytes:
    """Download the raw price feed body with a single request.

    Any network, TLS or timeout failure and any non-2xx status raises
    :class:`TransportError`. Nothing is retried.
    """

    _validate_url(url)
    if not verify_tls:
        LOGGER.warning("TLS certificate verification is disabled for %s", url)
    sess = session or requests.Session()
    try:
        response = sess.get(
            url,
            timeout=timeout,
            verify=verify_tls,
            headers={"User-Agent": user_agent, "Accept": "application/json"},
        )
    except requests.RequestException as exc:
        raise TransportError(f"Unable to fetch price feed from {url}: {exc}") from exc
    finally:
        if session is None:
            sess.close()
    _raise_with_context(response, url)
    body = response.content
    LOGGER.info("Fetched %s bytes of price data from %s", len(body), url)
    return body


def _require_price(item: dict[str, Any], key: str, index: int) -> float:
    if key not in item:
        raise ParseError(f"items[{index}] is missing '{key}'")
    value = item[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"items[{index}].{key} must be a number, got {type(value).__name__}")
    return float(value)


def _require_currency(item: dict[str, Any], index: int) -> str:
    value = item.get("curr")
    if not isinstance(value, str) or not value.strip():
        raise ParseError(f"items[{index}].curr must be a non-empty string")
    return value.strip()


def parse_price_feed(body: bytes | str) -> list[PriceRecord]:
    """Decode a ``dbXRates`` document into price records, in feed order.

    The document looks like ``{"items": [{"curr": "USD", "xauPrice": 2000.0,
    "xagPrice": 25.0, ...}]}``; unknown keys are ignored. Any structural
    problem fails the whole parse.
    """

    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise ParseError(f"Price feed is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict) or "items" not in payload:
        raise ParseError("Price feed has no 'items' member")
    items = payload["items"]
    if not isinstance(items, list):
        raise ParseError(f"Price feed 'items' must be an array, got {type(items).__name__}")

    records: list[PriceRecord] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ParseError(f"items[{index}] must be an object")
        records.append(
            PriceRecord(
                currency=_require_currency(item, index),
                gold_price_oz=_require_price(item, "xauPrice", index),
                silver_price_oz=_require_price(item, "xagPrice", index),
            )
        )
    return records


class GoldPriceFeed:
    """HTTP implementation of :class:`PriceFeedStrategy` for goldprice.org."""

    def __init__(
        self,
        settings: FetchSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or FetchSettings()
        self.session = session

    def fetch(self) -> bytes:
        return fetch_price_feed(
            self.settings.url,
            session=self.session,
            timeout=self.settings.timeout,
            verify_tls=self.settings.verify_tls,
            user_agent=self.settings.user_agent,
        )


__all__ = [
    "GOLDPRICE_BASE_URL",
    "DEFAULT_CURRENCIES",
    "DEFAULT_RATES_URL",
    "DEFAULT_TIMEOUT",
    "FetchSettings",
    "GoldPriceFeed",
    "build_rates_url",
    "fetch_price_feed",
    "parse_price_feed",
]
