"""Unit and purity conversion factors plus the rounding rule for published prices."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

OZ_TO_GRAM: Final[float] = 31.1035
GRAM_TO_KG: Final[int] = 1000
TOLA_TO_GRAM: Final[float] = 11.66

PURITY_24K: Final[float] = 1.0000
PURITY_22K: Final[float] = 0.9167
PURITY_21K: Final[float] = 0.8750
PURITY_18K: Final[float] = 0.7500

PRICE_DECIMALS: Final[int] = 2
_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMALS)


@dataclass(frozen=True, slots=True)
class ConversionFactors:
    """Immutable bundle of the factors used by the rate calculator."""

    oz_to_gram: float = OZ_TO_GRAM
    gram_to_kg: int = GRAM_TO_KG
    tola_to_gram: float = TOLA_TO_GRAM
    purity_24k: float = PURITY_24K
    purity_22k: float = PURITY_22K
    purity_21k: float = PURITY_21K
    purity_18k: float = PURITY_18K


DEFAULT_FACTORS: Final[ConversionFactors] = ConversionFactors()


def round_price(value: float) -> float:
    """Round ``value`` to two decimals, halves away from zero.

    The float is first turned into its shortest decimal representation so that
    ``2.675`` rounds to ``2.68`` the way a reader expects, instead of ``2.67``
    which :func:`round` returns for the underlying binary value.
    """

    exact = Decimal(repr(float(value)))
    with localcontext() as ctx:
        # Room for every integer digit plus the decimals.
        ctx.prec = max(ctx.prec, exact.adjusted() + PRICE_DECIMALS + 2)
        quantised = exact.quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    # Adding 0.0 turns -0.0 into 0.0.
    return float(quantised) + 0.0


__all__ = [
    "OZ_TO_GRAM",
    "GRAM_TO_KG",
    "TOLA_TO_GRAM",
    "PURITY_24K",
    "PURITY_22K",
    "PURITY_21K",
    "PURITY_18K",
    "PRICE_DECIMALS",
    "ConversionFactors",
    "DEFAULT_FACTORS",
    "round_price",
]
