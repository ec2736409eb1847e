"""
Logging configuration for sqlcsv.

Standard output is reserved for CSV, so console logging goes to stderr with
a short ``[LEVEL] message`` format. An optional log file receives DEBUG
records with timestamps.
"""
import logging
import sys
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "sqlcsv"

_level = logging.INFO
_log_file: Optional[Path] = None


def _build_handlers(level: int, log_file: Optional[Path]) -> List[logging.Handler]:
    # Console handler with clean formatting
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    handlers: List[logging.Handler] = [console_handler]

    # Optional file handler with more detailed format
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        handlers.append(file_handler)

    return handlers


def setup_logger(
    name: str,
    level: Optional[int] = None,
    log_file: Optional[Path] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: the level set by configure_logging)
        log_file: Optional file path for log output

    Returns:
        Configured logger instance
    """
    level = _level if level is None else level
    log_file = log_file or _log_file

    logger = logging.getLogger(name)
    # File records are kept at DEBUG even when the console is quieter.
    logger.setLevel(min(level, logging.DEBUG) if log_file else level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in _build_handlers(level, log_file):
        logger.addHandler(handler)

    # Prevent propagation to root logger
    logger.propagate = False

    return logger


def configure_logging(level: int = logging.INFO, log_file: Optional[Path] = None) -> None:
    """
    Apply a level and optional log file to every sqlcsv logger created so
    far, and make them the defaults for loggers created later.
    """
    global _level, _log_file
    _level = level
    _log_file = log_file

    names = [
        name for name in list(logging.Logger.manager.loggerDict)
        if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
    ]
    for name in names:
        setup_logger(name, level, log_file)
