"""Logging utilities for the gold_bharat package."""

from __future__ import annotations

import logging
from typing import Optional

_CONFIGURED: Optional[bool] = None


def get_logger(name: str = "gold_bharat") -> logging.Logger:
    """Return a named logger, configuring the root handler on first use."""
    global _CONFIGURED
    if _CONFIGURED is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _CONFIGURED = True
    return logging.getLogger(name)
