"""
Configuration & Defaults
========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Tolerances: every ``is_close`` comparison in the package reads its default
   absolute tolerance from here instead of hardcoding ``1e-9`` in each class.
2. Logging: the default log level can be overridden through an environment
   variable without touching code.

Exports:
    DEFAULT_ABS_TOL (float): Default absolute tolerance for float comparison.
    LOG_LEVEL_ENV (str): Name of the environment variable holding the log level.
"""
import logging
import os

# Global Constants
DEFAULT_ABS_TOL: float = 1e-9
DEFAULT_LOG_LEVEL: int = logging.INFO
LOG_LEVEL_ENV: str = "AFFINE2D_LOG_LEVEL"


def get_log_level() -> int:
    """
    Read the log level from the environment, e.g. AFFINE2D_LOG_LEVEL=DEBUG.

    Unknown names fall back to DEFAULT_LOG_LEVEL.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return DEFAULT_LOG_LEVEL

    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return DEFAULT_LOG_LEVEL
