"""Environment-driven settings for the datum package."""

from __future__ import annotations

import logging
import os
from typing import Final, Optional

LOG_LEVEL_ENV: Final[str] = "DATUM_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"


def log_level() -> Optional[int]:
    """Return the numeric level requested through ``DATUM_LOG_LEVEL``.

    Accepts level names (``debug``, ``WARNING``) or integers. Returns ``None``
    when the variable is unset so the host's logging setup decides. Unknown
    names log a warning and fall back to :data:`DEFAULT_LOG_LEVEL`.
    """

    raw = os.environ.get(LOG_LEVEL_ENV)
    if raw is None:
        return None
    raw = raw.strip()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        logging.getLogger(__name__).warning(
            "Ignoring invalid %s=%r; using %s", LOG_LEVEL_ENV, raw, DEFAULT_LOG_LEVEL
        )
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


__all__ = ["LOG_LEVEL_ENV", "DEFAULT_LOG_LEVEL", "log_level"]
