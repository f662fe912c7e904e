"""
Utility Helper Functions
========================

Common utility functions used across the project.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from config import LOGS_DIR, get_config


def setup_logging(
    config: Optional[dict] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None
):
    """
    Configure loguru sinks from the ``logging`` config section.

    Args:
        config: Configuration dictionary (defaults to config.yaml)
        level: Overrides the configured level
        log_file: Overrides the configured log file name
        log_dir: Directory for relative log file names (defaults to logs/)

    Returns:
        Effective logging level
    """
    log_config = (config or get_config()).get("logging", {})
    level = (level or log_config.get("level", "INFO")).upper()
    log_file = log_file or log_config.get("log_file")

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
    )

    if log_file:
        log_path = Path(log_dir or LOGS_DIR) / log_file
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            rotation=log_config.get("rotation", "10 MB"),
            retention=log_config.get("retention", "7 days"),
            compression="zip"
        )
        logger.debug(f"Writing logs to {log_path}")

    logger.info(f"Logging configured at {level} level")
    return level


def get_timestamp(format_str: str = "%Y%m%d_%H%M%S") -> str:
    """
    Get current timestamp string.

    Args:
        format_str: Datetime format string

    Returns:
        Formatted timestamp
    """
    return datetime.now().strftime(format_str)


def format_probability(probability: float, precision: int = 1) -> str:
    """Format a probability as a percentage, e.g. 0.5818 -> '58.2%'."""
    return f"{probability * 100:.{precision}f}%"
