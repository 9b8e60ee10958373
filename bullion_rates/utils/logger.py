"""Logging utilities for the bullion_rates package."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "bullion_rates") -> logging.Logger:
    """Return a module-level logger that writes to stderr.

    stdout is reserved for the rate table JSON.
    """
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
        _LOGGER = logging.getLogger(name)
    return logging.getLogger(name)
