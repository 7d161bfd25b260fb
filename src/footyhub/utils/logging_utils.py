"""
Logging utilities for FootyHub.

Provides a simple, consistent logger configuration so that every module can log
to stdout with a formatted timestamp and log level.
"""

import logging
from typing import Optional

from footyhub.settings import get_settings


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger with the given name.

    If the root logger has no handlers configured yet, this function also
    configures a basic StreamHandler at the LOG_LEVEL setting (default INFO).

    Parameters
    ----------
    name : str | None
        Logger name. If None, the "footyhub" logger is returned.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger_name = name if name is not None else "footyhub"
    logger = logging.getLogger(logger_name)

    if not logging.getLogger().handlers:
        # Configure root logger once
        level = get_settings().log_level.upper()
        logging.basicConfig(
            level=getattr(logging, level, logging.INFO),
            format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        )

    return logger
