"""
Logging utilities for packageGraph
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger


CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(level: str = "INFO", log_dir: Optional[str] = None):
    """
    Setup loguru with a console sink and an optional file sink

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory to save log files, None to log to stderr only

    Returns:
        Configured logger instance
    """
    # Clear existing sinks
    logger.remove()

    logger.add(sys.stderr, level=level.upper(), format=CONSOLE_FORMAT)

    if log_dir:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d")
        log_file = Path(log_dir) / f"packageGraph_{timestamp}.log"
        # Always save detailed logs to file
        logger.add(str(log_file), level="DEBUG", format=FILE_FORMAT, encoding="utf-8")

    return logger
