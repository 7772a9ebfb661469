"""
Logging Configuration
Sets up the package logger for applications embedding affine2d.
"""
import logging
import sys
from typing import Optional

from affine2d.config import get_log_level


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the logger for the 'affine2d' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). Read from the
            AFFINE2D_LOG_LEVEL environment variable when omitted.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = get_log_level()

    logger = logging.getLogger("affine2d")
    logger.setLevel(level)

    # Release handlers from an earlier call so log files are not left open
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    # 1. Console Handler (stdout)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    # 2. File Handler (Optional)
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
