"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers below the ``html2plain`` namespace.
    - Allow optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Configuration is idempotent; repeated calls never stack handlers.
    - The library itself only logs; handlers are attached by the CLI.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "html2plain"

_HANDLER_ATTR = "_html2plain_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` placed under the package namespace."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    ``verbose`` selects ``DEBUG``; otherwise only warnings are shown.
    """

    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in root.handlers:
        if getattr(handler, _HANDLER_ATTR, False):
            break
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
    return root


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
