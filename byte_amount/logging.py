"""
Logging configuration for byte_amount.

The package logs through loguru. Its namespace is disabled on import so
library users see nothing until they call setup_logging().
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

from loguru import logger


# Default log directory
LOG_DIR = Path('./logs')

LOG_FORMAT = '{time:YYYY-MM-DD HH:mm:ss} | {level:<8} | {name}:{function}:{line} | {message}'


def setup_logging(log_dir: Path | None = None, level: str = 'DEBUG') -> Any:
    """Send byte_amount log records to a rotating file.

    Args:
        log_dir: Directory for log files. Defaults to ./logs
        level: Minimum level written to the file

    Returns:
        The loguru logger
    """
    if log_dir is None:
        log_dir = LOG_DIR

    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / 'byte_amount.log'

    logger.add(
        log_path,
        rotation='5 MB',
        retention='30 days',
        compression='gz',
        format=LOG_FORMAT,
        level=level,
        filter='byte_amount',
    )
    logger.enable('byte_amount')
    return logger


logger.disable('byte_amount')
