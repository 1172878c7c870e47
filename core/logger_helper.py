"""
logger_helper.py - Logging Helpers

Every module gets its logger through get_logger(__name__).
The CLI calls configure_logging() once at startup.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "[%(levelname)s] %(message)s"

_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger with the given name, or the module name if None

    Args:
        name: Optional logger name (usually __name__ of the caller)

    Returns:
        Logger instance
    """
    return logging.getLogger(name or __name__)


def configure_logging(verbose: bool = False, stream=None) -> logging.Handler:
    """
    Install a single stderr handler on the root logger

    Calling it again replaces the previous handler instead of stacking a
    second one.

    Args:
        verbose: Log DEBUG and above when True, WARNING and above otherwise
        stream: Output stream (defaults to sys.stderr)

    Returns:
        The installed handler
    """
    global _handler

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)

    level = logging.DEBUG if verbose else logging.WARNING
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)
    _handler = handler
    return handler
