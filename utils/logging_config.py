"""
Centralized logging configuration.
All modules should use get_logger() instead of print().
"""

import logging
import sys

# Cache for logger instances
_loggers = {}

DEFAULT_FORMAT = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'

ROOT_LOGGER_NAME = 'inkfinder'


def setup_logging(level: str = None, log_file: str = None):
    """
    Configure the root logger for the application.
    Call this once at application or script startup.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for log output
    """
    if level is None:
        level = 'INFO'

    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(log_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (usually a component name like 'TagRepair', 'Store')

    Returns:
        Logger under the application namespace

    Usage:
        logger = get_logger('TagRepair')
        logger.info("Scanning artists...")
    """
    if name not in _loggers:
        _loggers[name] = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    return _loggers[name]
