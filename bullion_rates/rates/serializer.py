"""Render a rate table as pretty-printed JSON with fixed two-decimal prices."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Mapping

from bullion_rates.ingestion.models import RateTable, rate_table_as_dict
from bullion_rates.utils.units import PRICE_DECIMALS


def _format_number(value: float) -> str:
    # Shortest repr keeps 1e27 from printing its binary expansion; + 0.0 drops the sign of -0.0.
    return f"{Decimal(repr(float(value) + 0.0)):.{PRICE_DECIMALS}f}"


def _encode(value: Mapping[str, Any] | float, indent: int, level: int) -> str:
    if not isinstance(value, Mapping):
        return _format_number(value)
    if not value:
        return "{}"
    inner = " " * (indent * (level + 1))
    outer = " " * (indent * level)
    members = [
        f"{inner}{json.dumps(key)}: {_encode(item, indent, level + 1)}"
        for key, item in value.items()
    ]
    return "{\n" + ",\n".join(members) + "\n" + outer + "}"


def serialize_rate_table(table: RateTable, *, indent: int = 4) -> str:
    """Return ``table`` as JSON text.

    The layout matches ``json.dumps(..., indent=indent)`` except that every
    number is written with exactly two decimals (``5.00`` rather than ``5.0``).
    The standard encoder always uses ``float.__repr__`` so the document is
    assembled here instead.
    """

    return _encode(rate_table_as_dict(table), indent, 0)


__all__ = ["serialize_rate_table"]
