"""Currency codes published by the goldprice.org rate feed."""

from __future__ import annotations

import re
from typing import Final, Iterable

# Reference list only; the pipeline echoes whatever codes the provider returns.
SUPPORTED_CURRENCIES: Final[tuple[str, ...]] = (
    "USD", "AED", "AFN", "ALL", "AMD", "ANG", "AOA", "ARS", "AUD", "AWG", "AZN", "BAM",
    "BBD", "BDT", "BGN", "BHD", "BIF", "BMD", "BND", "BOB", "BRL", "BSD", "BTN", "BWP",
    "BYN", "BZD", "CAD", "CDF", "CHF", "CLP", "CNY", "COP", "CRC", "CUC", "CUP", "CVE",
    "CZK", "DJF", "DKK", "DOP", "DZD", "EGP", "ERN", "ETB", "EUR", "FJD", "FKP", "GBP",
    "GEL", "GGP", "GHS", "GIP", "GMD", "GNF", "GTQ", "GYD", "HKD", "HNL", "HRK", "HTG",
    "HUF", "IDR", "ILS", "IMP", "INR", "IQD", "IRR", "ISK", "JEP", "JMD", "JOD", "JPY",
    "KES", "KGS", "KHR", "KMF", "KPW", "KRW", "KWD", "KYD", "KZT", "LAK", "LBP", "LKR",
    "LRD", "LSL", "LYD", "MAD", "MDL", "MGA", "MKD", "MMK", "MNT", "MOP", "MRU", "MUR",
    "MVR", "MWK", "MXN", "MYR", "MZN", "NAD", "NGN", "NIO", "NOK", "NPR", "NZD", "OMR",
    "PAB", "PEN", "PGK", "PHP", "PKR", "PLN", "PYG", "QAR", "RON", "RSD", "RUB", "RWF",
    "SAR", "SBD", "SCR", "SDG", "SEK", "SGD", "SHP", "SLL", "SOS", "SRD", "STD", "SVC",
    "SYP", "SZL", "THB", "TJS", "TMT", "TND", "TOP", "TRY", "TTD", "TWD", "TZS", "UAH",
    "UGX", "UYU", "UZS", "VEF", "VND", "VUV", "WST", "XAF", "XAG", "XAU", "XCD", "XDR",
    "XOF", "XPD", "XPF", "XPT", "YER", "ZAR", "ZMW",
)

_CODE_PATTERN = re.compile(r"^[A-Z]{3}$")


def normalise_currencies(currencies: str | Iterable[str]) -> list[str]:
    """Upper-case, split comma lists and de-duplicate while keeping order.

    Codes must be three ASCII letters; membership in
    :data:`SUPPORTED_CURRENCIES` is not enforced.
    """

    raw = [currencies] if isinstance(currencies, str) else list(currencies)
    codes: list[str] = []
    for chunk in raw:
        for part in str(chunk).split(","):
            code = part.strip().upper()
            if not code:
                continue
            if not _CODE_PATTERN.match(code):
                raise ValueError(f"Invalid currency code: {part.strip()!r}")
            if code not in codes:
                codes.append(code)
    if not codes:
        raise ValueError("At least one currency code is required")
    return codes


__all__ = ["SUPPORTED_CURRENCIES", "normalise_currencies"]
