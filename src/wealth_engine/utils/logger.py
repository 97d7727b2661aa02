"""
Logging Framework Module
========================
Centralized logging configuration for the calculation engine.

Features:
- Console output with colored formatting
- Optional file logging (set WEALTH_ENGINE_LOG_DIR)
- Performance tracking decorator
"""

import functools
import logging
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from wealth_engine.utils.exceptions import InvalidHoldingError, InvalidParameterError


# ================================================================================
# LOG LEVELS AND CONFIGURATION
# ================================================================================

DEFAULT_CONFIG = {
    'console_level': logging.WARNING,
    'file_level': logging.DEBUG,
    'log_dir_env': 'WEALTH_ENGINE_LOG_DIR',
    'level_env': 'WEALTH_ENGINE_LOG_LEVEL',
    'format': '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s',
    'date_format': '%Y-%m-%d %H:%M:%S',
}


# ================================================================================
# CUSTOM FORMATTER WITH COLORS
# ================================================================================

class ColoredFormatter(logging.Formatter):
    """Formatter with ANSI color codes for console output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        # Color a copy so file handlers sharing the record stay plain
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"

        return super().format(record)


# ================================================================================
# LOGGER SETUP
# ================================================================================

def _console_level_from_env() -> int:
    raw = os.environ.get(DEFAULT_CONFIG['level_env'])
    if not raw:
        return DEFAULT_CONFIG['console_level']
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else DEFAULT_CONFIG['console_level']


def setup_logger(
    name: str,
    console_level: Optional[int] = None,
    file_level: int = DEFAULT_CONFIG['file_level'],
    log_dir: Optional[str] = None,
) -> logging.Logger:
    """
    Configure and return a logger with a console handler and an optional
    file handler.

    Args:
        name: Logger name (usually __name__ of the module)
        console_level: Minimum level for console output
            (defaults to WEALTH_ENGINE_LOG_LEVEL, then WARNING)
        file_level: Minimum level for file output
        log_dir: Directory for log files (defaults to WEALTH_ENGINE_LOG_DIR;
            no file logging when neither is set)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)  # Capture all, filter in handlers

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level if console_level is not None else _console_level_from_env())
    console_handler.setFormatter(ColoredFormatter(
        fmt=DEFAULT_CONFIG['format'],
        datefmt=DEFAULT_CONFIG['date_format']
    ))
    logger.addHandler(console_handler)

    log_dir = log_dir or os.environ.get(DEFAULT_CONFIG['log_dir_env'])
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime('%Y%m%d')
        log_file = log_path / f"{name.replace('.', '_')}_{timestamp}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            fmt=DEFAULT_CONFIG['format'],
            datefmt=DEFAULT_CONFIG['date_format']
        ))
        logger.addHandler(file_handler)

    return logger


# ================================================================================
# PERFORMANCE TRACKING DECORATOR
# ================================================================================

def log_performance(logger: logging.Logger):
    """
    Decorator to log function execution time.

    Usage:
        @log_performance(logger)
        def expensive_function():
            ...
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            logger.debug(f"Starting {func.__name__}")

            try:
                result = func(*args, **kwargs)
                elapsed = time.perf_counter() - start_time
                logger.debug(f"Completed {func.__name__} in {elapsed * 1000:.1f}ms")
                return result
            except (InvalidParameterError, InvalidHoldingError) as e:
                # Rejected caller input, reported by the caller
                elapsed = time.perf_counter() - start_time
                logger.debug(f"Rejected input to {func.__name__} after {elapsed * 1000:.1f}ms: {e}")
                raise
            except Exception as e:
                elapsed = time.perf_counter() - start_time
                logger.error(f"Failed {func.__name__} after {elapsed * 1000:.1f}ms: {e}")
                raise

        return wrapper
    return decorator


# ================================================================================
# MODULE-SPECIFIC LOGGERS
# ================================================================================

def get_logger(module_name: str) -> logging.Logger:
    """
    Get or create a logger for a specific module.

    Usage:
        from wealth_engine.utils.logger import get_logger
        logger = get_logger(__name__)
        logger.debug("Projection started")
    """
    return setup_logger(module_name)
