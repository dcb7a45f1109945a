"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``combinable`` namespace.
    - Allow an optional verbose/debug mode for the command line.

Notes/Edge cases:
    - Configuration is idempotent; library use never installs output
      handlers, only a ``NullHandler`` on the package logger.

Dependencies:
    - Python `logging` module.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "combinable"

_root = logging.getLogger(ROOT_LOGGER_NAME)
if not any(isinstance(h, logging.NullHandler) for h in _root.handlers):
    _root.addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once replaces the previous handler rather than
    stacking another one, and rebinds to the current ``sys.stderr``.
    """

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level = logging.DEBUG if verbose else logging.WARNING
    root.setLevel(level)
    for old in [h for h in root.handlers if getattr(h, "_combinable_cli", False)]:
        root.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    handler.setLevel(level)
    handler._combinable_cli = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    return root


__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure_logging"]
