"""
Logging utilities
"""

import sys
from pathlib import Path
from typing import Optional
from loguru import logger

from maze_solver.common.constants import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT_CONSOLE,
    LOG_FORMAT_FILE,
)


def SetupLogger(level: str = DEFAULT_LOG_LEVEL, log_dir: Optional[str] = None):
    """
    Setup logger with console output and optional file output

    Args:
        level: Logging level
        log_dir: Directory to save log files, console only when None
    """
    # Remove default handler
    logger.remove()

    # Console handler with colors
    logger.add(
        sys.stderr,
        format=LOG_FORMAT_CONSOLE,
        level=level,
        colorize=True
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path / "maze_solver_{time:YYYY-MM-DD}.log",
            rotation="00:00",  # Rotate at midnight
            retention="7 days",  # Keep logs for 7 days
            level=level,
            encoding="utf-8",
            format=LOG_FORMAT_FILE
        )

    return logger
