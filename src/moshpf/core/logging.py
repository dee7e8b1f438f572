"""Logging setup for the moshpf launcher.

All launcher output goes to stderr so that the wrapped binary owns stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "moshpf"

_PLAIN_FORMAT = "%(message)s"
_DEBUG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the launcher's root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    *,
    debug: bool = False,
    quiet: bool = False,
    stream: Optional[object] = None,
) -> None:
    """Configure the launcher's root logger.

    Precedence: quiet > debug > default (info).

    Args:
        debug: Show debug records with timestamps and logger names.
        quiet: Show errors only.
        stream: Target stream, defaults to ``sys.stderr``.
    """
    if quiet:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reconfiguring replaces the previous handler instead of stacking them.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)  # type: ignore[arg-type]
    handler.setFormatter(logging.Formatter(_DEBUG_FORMAT if debug else _PLAIN_FORMAT))
    logger.addHandler(handler)
