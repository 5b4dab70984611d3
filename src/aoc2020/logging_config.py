"""
Logging Configuration
Routes the diagnostics of every puzzle module to stderr, keeping stdout for
the answers themselves.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "aoc2020"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str]) -> int:
    """
    Accept a numeric level or a level name such as ``"debug"``.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``aoc2020`` namespace logger used by the day modules.

    Calling it again replaces the previous handlers, so repeated CLI runs in
    one process do not duplicate output.

    Args:
        level: Logging level, as a number or a name from ``--log-level``.
        log_file: Optional path that receives a copy of the log.

    Returns:
        The configured package logger.
    """
    numeric_level = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Looked up per call so a replaced sys.stderr is honoured
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Puzzle logging at {logging.getLevelName(numeric_level)}"
                 + (f", copied to {log_file}" if log_file else ""))
    return logger
