"""Logging helpers for the converter package.

Handlers and levels are left to the host application; modules only obtain
named loggers here.
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logging.getLogger(name)
