"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Hand out loggers below the ``paragrapher`` namespace.
    - Switch on stderr output for the CLI ``--verbose`` mode.

Notes/Edge cases:
    - The package logger carries a ``NullHandler`` so library use stays silent
      unless the host application configures logging.
    - :func:`configure_logging` is idempotent; calling it repeatedly never
      stacks handlers.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "paragrapher"
_HANDLER_NAME = "paragrapher-stderr"
_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` placed under the package namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG``; otherwise only warnings are shown.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in logger.handlers:
        if handler.get_name() == _HANDLER_NAME and isinstance(handler, logging.StreamHandler):
            # sys.stderr may have been swapped since the handler was created
            handler.setStream(sys.stderr)
            break
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
