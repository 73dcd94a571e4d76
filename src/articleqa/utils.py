"""Utility functions for the articleqa package."""

import logging
import time
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Install the root handler used by the CLI.

    Args:
        level: Level name such as "INFO" or "DEBUG". Unknown names fall back to WARNING.
    """
    numeric = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)


def log_with_prefix(logger: logging.Logger, level: int, prefix: str, message: str, *args: Any, **kwargs: Any) -> None:
    """Log a message with a bracketed step prefix.

    Args:
        logger: The logger to use.
        level: The logging level (e.g., logging.DEBUG).
        prefix: The step name shown in brackets.
        message: The log message.
        *args: Additional arguments for the logger.
        **kwargs: Additional keyword arguments for the logger.
    """
    logger.log(level, f"[{prefix}] {message}", *args, **kwargs)


def log_timing(logger: logging.Logger, prefix: str, start_time: float, message: str, *args: Any, **kwargs: Any) -> None:
    """Log `message` at DEBUG with the seconds elapsed since `start_time` (a time.time() value)."""
    elapsed = time.time() - start_time
    log_with_prefix(logger, logging.DEBUG, prefix, f"{message} in {elapsed:.2f}s", *args, **kwargs)


def preview(text: str, limit: int = 200) -> str:
    """Return the first `limit` characters of `text`, with an ellipsis when truncated."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
