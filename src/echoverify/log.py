# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging setup for the echoverify CLI and for test suites using the client.

Only the ``echoverify`` logger hierarchy follows the requested level; the root
logger stays at WARNING so httpx/httpcore debug output does not flood test runs.
"""

from __future__ import annotations

import logging
import os

LOGGER_NAME = "echoverify"
LOG_LEVEL_ENV = "ECHOVERIFY_LOG_LEVEL"
FALLBACK_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_log_level(level: str | None = None) -> int:
    """Explicit level wins, then ECHOVERIFY_LOG_LEVEL (read now), then WARNING."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or "").strip().upper()
    value = logging.getLevelName(name) if name else FALLBACK_LEVEL
    return value if isinstance(value, int) else FALLBACK_LEVEL


def setup_logging(level: str | None = None) -> logging.Logger:
    effective_level = resolve_log_level(level)
    logging.basicConfig(level=FALLBACK_LEVEL, format=LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(effective_level)
    return logger


__all__ = ["LOGGER_NAME", "resolve_log_level", "setup_logging"]
