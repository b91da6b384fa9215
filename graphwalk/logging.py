"""Logging for graphwalk.

Every module logs through ``get_logger(__name__)``, so all records land under
the ``graphwalk`` logger. That logger owns the only handler (stdout by
default). Walkers and queries log lifecycle events at DEBUG and guard
violations at WARNING; nothing is logged per visited node.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Iterator, Optional

PACKAGE_LOGGER = "graphwalk"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler of the ``graphwalk`` logger.

    Later calls are no-ops until `reset_logging` runs, so repeated imports
    never stack handlers.

    Args:
        level: Package log level (default: INFO).
        format_string: Record format (default: `DEFAULT_FORMAT`).
        handler: Destination handler (default: StreamHandler on stdout).
    """
    global _configured
    if _configured:
        return

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(level)

    handler = handler if handler is not None else logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    package_logger.addHandler(handler)

    # Propagation stays on for pytest's caplog
    package_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name``, configuring the package logger first.

    Args:
        name: Module name, normally ``__name__``.

    Returns:
        A logger without handlers of its own whose level follows the package
        logger.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the package logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show DEBUG records (walk starts, settled counts, component totals)."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO."""
    set_global_log_level(logging.INFO)


@contextmanager
def log_level(level: int) -> Iterator[None]:
    """Temporarily change the package log level.

    Example:
        >>> with log_level(logging.DEBUG):
        ...     list(breadth_first_nodes(graph, start))
    """
    setup_root_logger()
    previous = logging.getLogger(PACKAGE_LOGGER).level
    set_global_log_level(level)
    try:
        yield
    finally:
        set_global_log_level(previous)


def reset_logging() -> None:
    """Drop the package handler and level (used by tests)."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
