"""
Shared logging setup for the image collager.

Every module logs through ``logger`` so one handler and format serve the
engine, the loader and the CLI.
"""

import logging

LOGGER_NAME = "image_collager"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Return the named logger with a single stream handler attached.

    The handler is added on the first call only; later calls for the same
    name just update the level.

    Args:
        name: Logger name.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter.
        handler: Optional custom handler.

    Returns:
        The configured logger.

    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if logger_instance.handlers:
        return logger_instance

    handler = handler or logging.StreamHandler()
    handler.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    logger_instance.addHandler(handler)
    logger_instance.propagate = False
    return logger_instance


def set_verbose(verbose: bool) -> None:
    """Switch the shared logger between per-cell DEBUG output and INFO."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)


# Shared logger used across modules
logger = setup_logger()
