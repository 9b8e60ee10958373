from __future__ import annotations

import json

import pytest

from bullion_rates.ingestion.models import (
    CurrencyEntry,
    GoldRates,
    PriceRecord,
    SilverRates,
    rate_table_as_dict,
)
from bullion_rates.rates.calculator import aggregate_rates
from bullion_rates.rates.serializer import serialize_rate_table


def _entry(value: float) -> CurrencyEntry:
    return CurrencyEntry(
        gold_rates=GoldRates(*([value] * 8)),
        silver_rates=SilverRates(*([value] * 4)),
    )


def test_serialize_empty_table_is_empty_object() -> None:
    assert serialize_rate_table({}) == "{}"


def test_serialize_forces_two_decimals() -> None:
    table = aggregate_rates([PriceRecord(currency="USD", gold_price_oz=2000.0, silver_price_oz=25.0)])

    text = serialize_rate_table(table)

    assert '"Price_OZ": 2000.00,' in text
    assert '"Price_G": 64.30,' in text
    assert '"Price_22K": 1833.40,' in text
    assert '"Price_18K": 1500.00\n' in text
    assert '"Price_G": 0.80,' in text
    assert json.loads(text) == rate_table_as_dict(table)


def test_serialize_keeps_currency_and_field_order() -> None:
    table = aggregate_rates(
        [
            PriceRecord(currency="INR", gold_price_oz=2.0, silver_price_oz=2.0),
            PriceRecord(currency="USD", gold_price_oz=1.0, silver_price_oz=1.0),
        ]
    )

    document = json.loads(serialize_rate_table(table))

    assert list(document) == ["INR", "USD"]
    assert list(document["INR"]) == ["gold_rates", "silver_rates"]
    assert list(document["INR"]["gold_rates"]) == [
        "Price_OZ",
        "Price_G",
        "Price_KG",
        "Price_Tola",
        "Price_24K",
        "Price_22K",
        "Price_21K",
        "Price_18K",
    ]
    assert list(document["INR"]["silver_rates"]) == ["Price_OZ", "Price_G", "Price_KG", "Price_Tola"]


@pytest.mark.parametrize("indent", [4, 2])
def test_serialize_layout_matches_json_module(indent: int) -> None:
    table = {"USD": _entry(1.25), "EUR": _entry(10.5)}

    text = serialize_rate_table(table, indent=indent)

    expected = json.dumps(rate_table_as_dict(table), indent=indent).replace("10.5", "10.50")
    assert text == expected


def test_serialize_escapes_currency_keys() -> None:
    text = serialize_rate_table({'A"B': _entry(0.0)})

    assert text.startswith('{\n    "A\\"B": {')
    assert '"Price_OZ": 0.00' in text


def test_serialize_renders_large_prices_without_binary_noise() -> None:
    table = aggregate_rates([PriceRecord(currency="VEF", gold_price_oz=1e27, silver_price_oz=1.0)])

    text = serialize_rate_table(table)

    assert '"Price_OZ": 1000000000000000000000000000.00,' in text
    assert json.loads(text)["VEF"]["gold_rates"]["Price_OZ"] == 1e27


def test_serialize_never_renders_negative_zero() -> None:
    text = serialize_rate_table({"USD": _entry(-0.0)})

    assert "-0.00" not in text
    assert '"Price_OZ": 0.00' in text
