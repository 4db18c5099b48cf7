"""Logging utilities for the datum package."""

from __future__ import annotations

import logging
from typing import Optional

from datum.settings import log_level

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: str = "datum") -> logging.Logger:
    """Return a logger under the ``datum`` hierarchy configured on first use.

    When ``DATUM_LOG_LEVEL`` is set it fixes the ``datum`` logger level (see
    :func:`datum.settings.log_level`); otherwise the level is inherited.
    """
    global _LOGGER
    if _LOGGER is None:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _LOGGER = logging.getLogger("datum")
        level = log_level()
        if level is not None:
            _LOGGER.setLevel(level)
    return logging.getLogger(name)
