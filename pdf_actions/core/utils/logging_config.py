"""
Logging configuration for the pdf-actions package.
Provides console and file-based logging plus operation tracking.
"""

import sys
from functools import wraps
from pathlib import Path
from typing import Optional

from loguru import logger

from ...config.settings import LOG_DIR, LOG_FORMAT, LOG_LEVEL


def initialize_logging(logs_dir: Optional[Path] = None, level: Optional[str] = None) -> Path:
    """Initialize logging with a console sink and rotating log files"""

    logs_dir = Path(logs_dir or LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)
    level = level or LOG_LEVEL

    # Remove default logger
    logger.remove()

    # Add console logger
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=level
    )

    # Add application log file
    logger.add(
        logs_dir / "actions_application.log",
        format=LOG_FORMAT,
        level=level,
        rotation="10 MB",
        retention="30 days"
    )

    # Add error log file
    logger.add(
        logs_dir / "actions_errors.log",
        format=LOG_FORMAT,
        level="ERROR",
        rotation="5 MB",
        retention="30 days"
    )

    logger.debug(f"Log files location: {logs_dir}")
    return logs_dir


def create_operation_context(operation_name: str):
    """Decorator to create operation context with logging"""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            logger.debug(f"Entering operation context: {operation_name}")
            try:
                result = func(*args, **kwargs)
                logger.debug(f"Exiting operation context: {operation_name}")
                return result
            except Exception as e:
                logger.error(f"Operation context failed: {operation_name} - {e}")
                raise
        return wrapper
    return decorator


__all__ = [
    'initialize_logging',
    'create_operation_context',
]
