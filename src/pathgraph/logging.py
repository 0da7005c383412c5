"""Logging helpers for pathgraph.

The library only emits records; applications decide where they go. A
``NullHandler`` on the package logger keeps records quiet until an
application configures logging or calls ``setup_root_logger``.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "pathgraph"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the package logger.

    Calling it again replaces the previous handler instead of stacking a new
    one on top.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    for existing in list(root_logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            root_logger.removeHandler(existing)

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Keep propagating so pytest's caplog still sees records
    root_logger.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the pathgraph hierarchy.

    Args:
        name: Logger name, typically ``__name__`` of the calling module.

    Returns:
        Logger that inherits the package logger's level and handlers.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the log level for every pathgraph logger."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
