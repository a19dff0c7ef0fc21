"""
Centralized logging utilities for the multi-image grid package.

Defines a shared logger instance and setup function so the loader,
compositor, and CLI all report through the same configured handler.
"""

import logging

LOGGER_NAME = "multi_image_grid"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def setup_logger(
        name: str = LOGGER_NAME,
        level: int = logging.INFO,
        formatter: logging.Formatter | None = None,
        handler: logging.Handler | None = None,
) -> logging.Logger:
    """
    Configure a logger with optional custom formatting and handler.

    Handlers are attached only once per logger name, so repeated calls
    return the same instance without duplicating output.

    Args:
        name: Logger name, defaults to the package logger.
        level: Logging level (e.g., logging.INFO, logging.DEBUG).
        formatter: Optional custom formatter.
        handler: Optional custom handler.

    Returns:
        A configured logger instance.

    """
    logger_instance = logging.getLogger(name)
    logger_instance.setLevel(level)
    if logger_instance.handlers:
        return logger_instance

    stream = handler or logging.StreamHandler()
    stream.setFormatter(formatter or logging.Formatter(LOG_FORMAT))
    logger_instance.addHandler(stream)
    logger_instance.propagate = False
    return logger_instance


def set_verbosity(
        *,
        verbose: bool,
        logger_instance: logging.Logger | None = None,
) -> None:
    """Switch a logger (the shared one by default) to DEBUG or INFO."""
    target = logger_instance or logger
    target.setLevel(logging.DEBUG if verbose else logging.INFO)


# Shared logger used across modules
logger = setup_logger()
