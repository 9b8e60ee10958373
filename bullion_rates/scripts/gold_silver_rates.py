"""CLI entry point for printing the gold/silver rate table."""

from __future__ import annotations

import sys

from bullion_rates.pipeline import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
