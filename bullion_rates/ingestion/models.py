"""Data models shared across the ingestion and rate modules."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict

GOLD_FIELD_NAMES: dict[str, str] = {
    "price_oz": "Price_OZ",
    "price_g": "Price_G",
    "price_kg": "Price_KG",
    "price_tola": "Price_Tola",
    "price_24k": "Price_24K",
    "price_22k": "Price_22K",
    "price_21k": "Price_21K",
    "price_18k": "Price_18K",
}

SILVER_FIELD_NAMES: dict[str, str] = {
    "price_oz": "Price_OZ",
    "price_g": "Price_G",
    "price_kg": "Price_KG",
    "price_tola": "Price_Tola",
}


@dataclass(slots=True)
class PriceRecord:
    """Spot prices per troy ounce for one currency, as returned by the feed."""

    currency: str
    gold_price_oz: float
    silver_price_oz: float


@dataclass(slots=True)
class GoldRates:
    price_oz: float
    price_g: float
    price_kg: float
    price_tola: float
    price_24k: float
    price_22k: float
    price_21k: float
    price_18k: float

    def as_dict(self) -> Dict[str, float]:
        return {GOLD_FIELD_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass(slots=True)
class SilverRates:
    price_oz: float
    price_g: float
    price_kg: float
    price_tola: float

    def as_dict(self) -> Dict[str, float]:
        return {SILVER_FIELD_NAMES[f.name]: getattr(self, f.name) for f in fields(self)}


@dataclass(slots=True)
class CurrencyEntry:
    """Derived gold and silver prices for a single currency."""

    gold_rates: GoldRates
    silver_rates: SilverRates

    def as_dict(self) -> Dict[str, Dict[str, float]]:
        return {
            "gold_rates": self.gold_rates.as_dict(),
            "silver_rates": self.silver_rates.as_dict(),
        }


# Insertion order follows the order currencies appear in the feed.
RateTable = Dict[str, CurrencyEntry]


def rate_table_as_dict(table: RateTable) -> Dict[str, Dict[str, Dict[str, float]]]:
    """Return ``table`` as plain nested dictionaries, preserving order."""

    return {currency: entry.as_dict() for currency, entry in table.items()}


__all__ = [
    "PriceRecord",
    "GoldRates",
    "SilverRates",
    "CurrencyEntry",
    "RateTable",
    "GOLD_FIELD_NAMES",
    "SILVER_FIELD_NAMES",
    "rate_table_as_dict",
]
