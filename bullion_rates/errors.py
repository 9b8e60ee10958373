"""Exception hierarchy raised by the rate pipeline."""

from __future__ import annotations

__all__ = ["BullionRatesError", "TransportError", "ParseError", "InvalidRecordError"]


class BullionRatesError(Exception):
    """Base class for every failure surfaced by :mod:`bullion_rates`."""


class TransportError(BullionRatesError):
    """The price feed could not be downloaded (network, TLS, timeout or HTTP status)."""


class ParseError(BullionRatesError, ValueError):
    """The price feed body is not the JSON document we expect."""


class InvalidRecordError(BullionRatesError, ValueError):
    """A price record carries a negative or non-finite price."""
