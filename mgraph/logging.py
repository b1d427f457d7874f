"""Centralized logging configuration for mgraph.

Every mgraph module logs through a child of the ``mgraph`` logger obtained with
`get_logger`. Only that root logger carries a handler. Container mutations log
at DEBUG; identity collisions and ID exhaustion log at ERROR before raising.
"""

import logging
import sys
from typing import Optional

_ROOT_LOGGER_NAME = "mgraph"

# Set once the package root logger has its handler attached
_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``mgraph`` logger.

    Runs on import. Later calls return immediately until `reset_logging`
    clears the configuration.

    Args:
        level: Logging level (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)

    handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees the records
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the ``mgraph`` hierarchy.

    The logger has no handler and no level of its own, so records reach the
    ``mgraph`` handler and obey the level set by `set_global_log_level`.

    Args:
        name: Logger name (typically ``__name__`` of the calling module).

    Returns:
        Logger instance.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``mgraph`` logger and its handlers.

    Module loggers inherit it, so this controls whether graph mutations are
    logged (DEBUG) or only failures (ERROR).

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO).
    """
    setup_root_logger()
    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log every node and line mutation."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO, hiding per-mutation records."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the ``mgraph`` handler and level so tests can start clean."""
    global _ROOT_LOGGER_CONFIGURED
    _ROOT_LOGGER_CONFIGURED = False

    root_logger = logging.getLogger(_ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
