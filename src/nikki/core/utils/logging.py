"""
Logging configuration using loguru.

Library code logs through ``loguru.logger`` directly. Applications embedding
nikki call setup_logging() once at startup to pick the level and sinks.
"""

import sys

from loguru import logger

from ..types import PathLike


def setup_logging(
    level: str = "WARNING",
    log_file: PathLike | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru with console and optional file output.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the console sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=fmt)

    if log_file:
        logger.add(
            str(log_file),
            level=level.upper(),
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
            rotation=rotation,
            retention=retention,
        )


def setup_logging_from_config(config) -> None:
    """Configure logging from the ``logging`` section of a :class:`~nikki.core.config.Config`."""
    setup_logging(
        level=config.get("logging.level", "WARNING"),
        log_file=config.get("logging.file") or None,
    )
