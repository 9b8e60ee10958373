"""Abstractions for pluggable price feeds."""

from __future__ import annotations

from typing import Protocol


class PriceFeedStrategy(Protocol):
    """Contract for retrieving a raw price feed document.

    Implementations perform a single fetch and return the undecoded response
    body, raising :class:`bullion_rates.errors.TransportError` on failure.
    """

    def fetch(self) -> bytes:
        ...  # pragma: no cover - protocol definition


__all__ = ["PriceFeedStrategy"]
