"""
Logging configuration for the reaction picker.

Replaces loguru's default stderr handler with a rotating file sink and an
optional colorized console sink. Call once at startup.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger


# Search queries are user input; keep them short in the logs.
QUERY_TRUNCATE_LENGTH = 50


def truncate_query(query: str, max_length: Optional[int] = None) -> str:
    """
    Truncate a search query for logging.

    Args:
        query: Query string to truncate
        max_length: Maximum length (defaults to QUERY_TRUNCATE_LENGTH)

    Returns:
        Truncated query with ellipsis if needed
    """
    if max_length is None:
        max_length = QUERY_TRUNCATE_LENGTH
    if len(query) <= max_length:
        return query
    return f"{query[:max_length]}..."


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru sinks.

    Args:
        level: Minimum level for every sink
        log_file: File sink path; no file sink when None
        console_output: Also log to stderr
        rotation: loguru rotation for the file sink
        retention: loguru retention for the file sink
    """
    logger.remove()  # Remove default handler
    if log_file is not None:
        logger.add(
            sink=str(log_file),
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )
    if console_output:
        logger.add(
            sink=sys.stderr,
            level=level,
            colorize=True,
        )
    logger.info(f"Reaction picker logging configured: level={level}, file={log_file}, console={console_output}")


def configure_logging_from_config(config: Optional[Dict[str, Any]] = None) -> None:
    """Configure logging from the `[logging]` section of the loaded configuration."""
    from .config import get_log_file_path, load_config

    if config is None:
        config = load_config()
    section = config.get("logging", {})
    configure_logging(
        level=str(section.get("level", "INFO")).upper(),
        log_file=get_log_file_path(config),
        console_output=bool(section.get("console_output", False)),
        rotation=section.get("rotation", "10 MB"),
        retention=section.get("retention", "7 days"),
    )
