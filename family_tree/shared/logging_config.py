"""
Common logging configuration for the family tree API
"""

import logging
import os
import sys


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _default_level() -> str:
    return os.environ.get('LOG_LEVEL', 'INFO')


def setup_logger(name: str, level: str | None = None) -> logging.Logger:
    """
    Setup a logger with consistent formatting across the project

    Args:
        name: Logger name (typically __name__)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL), defaults to LOG_LEVEL

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers if logger already configured
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, (level or _default_level()).upper()))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger


def get_project_logger(module_name: str, verbose: bool = False) -> logging.Logger:
    """
    Get a logger configured for the family tree project

    Args:
        module_name: Name of the module (typically __name__)
        verbose: Force debug level logging

    Returns:
        Configured logger that logs to stdout only
    """
    level = "DEBUG" if verbose else None
    return setup_logger(module_name, level)


def apply_log_level(level: str) -> None:
    """Re-level every project logger that was created before the app config was loaded"""
    numeric_level = getattr(logging, level.upper())
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith('family_tree'):
            logger.setLevel(numeric_level)
