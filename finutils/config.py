# finutils/config.py
"""Solver defaults and environment-driven settings."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Root finding defaults
DEFAULT_TOLERANCE = 1e-12
DEFAULT_BRACKET_PRECISION = 2
BRACKET_STEP_SIZE = 1.6
BRACKET_MAX_ATTEMPTS = 10
DEFAULT_BISECTION_MAX_ITER = 41  # 2^-40 ~ 1e-12 for unit-sized brackets
DEFAULT_NEWTON_RAPHSON_MAX_ITER = 10
DEFAULT_STAGE1_MAX_ITER = 2
DEFAULT_STAGE2_MAX_ITER = 10

# Finance defaults
DEFAULT_IRR_GUESS = 0.1

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = os.environ.get("FINUTILS_LOG_LEVEL", "WARNING").upper()


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "")
    try:
        return int(raw) if raw else default
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer)", name, raw)
        return default


N_JOBS = _env_int("FINUTILS_N_JOBS", 1)


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Configure root logging for scripts using finutils.

    The library itself never calls this; applications opt in. ``level``
    defaults to ``FINUTILS_LOG_LEVEL`` (WARNING when unset).
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
