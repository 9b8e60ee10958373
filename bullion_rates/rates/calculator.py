"""Derive per-unit and per-purity gold/silver prices from ounce spot prices."""

from __future__ import annotations

import math
from typing import Iterable

from bullion_rates.errors import InvalidRecordError
from bullion_rates.ingestion.models import (
    CurrencyEntry,
    GoldRates,
    PriceRecord,
    RateTable,
    SilverRates,
)
from bullion_rates.utils.logger import get_logger
from bullion_rates.utils.units import DEFAULT_FACTORS, ConversionFactors, round_price

LOGGER = get_logger(__name__)


def _checked_price(record: PriceRecord, name: str, value: float) -> float:
    if not math.isfinite(value):
        raise InvalidRecordError(f"{record.currency}: {name} is not finite ({value!r})")
    if value < 0:
        raise InvalidRecordError(f"{record.currency}: {name} is negative ({value!r})")
    return value


def calculate_rates(
    record: PriceRecord, factors: ConversionFactors = DEFAULT_FACTORS
) -> CurrencyEntry:
    """Return the rounded gold and silver rate blocks for ``record``.

    Gram, kilogram and tola prices all derive from the unrounded gram price;
    each field is rounded once, at the end.
    """

    gold_oz = _checked_price(record, "gold_price_oz", record.gold_price_oz)
    silver_oz = _checked_price(record, "silver_price_oz", record.silver_price_oz)

    gold_g = gold_oz / factors.oz_to_gram
    silver_g = silver_oz / factors.oz_to_gram

    gold = GoldRates(
        price_oz=round_price(gold_oz),
        price_g=round_price(gold_g),
        price_kg=round_price(gold_g * factors.gram_to_kg),
        price_tola=round_price(gold_g * factors.tola_to_gram),
        price_24k=round_price(gold_oz * factors.purity_24k),
        price_22k=round_price(gold_oz * factors.purity_22k),
        price_21k=round_price(gold_oz * factors.purity_21k),
        price_18k=round_price(gold_oz * factors.purity_18k),
    )
    silver = SilverRates(
        price_oz=round_price(silver_oz),
        price_g=round_price(silver_g),
        price_kg=round_price(silver_g * factors.gram_to_kg),
        price_tola=round_price(silver_g * factors.tola_to_gram),
    )
    return CurrencyEntry(gold_rates=gold, silver_rates=silver)


def aggregate_rates(
    records: Iterable[PriceRecord], factors: ConversionFactors = DEFAULT_FACTORS
) -> RateTable:
    """Fold records into a rate table keyed by currency.

    A currency seen twice keeps its first position but takes the values of the
    later record.
    """

    table: RateTable = {}
    for record in records:
        if record.currency in table:
            LOGGER.debug("Duplicate currency %s in feed; keeping the later record", record.currency)
        table[record.currency] = calculate_rates(record, factors)
    return table


__all__ = ["calculate_rates", "aggregate_rates"]
