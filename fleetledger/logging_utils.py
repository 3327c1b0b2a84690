"""Mini README: Application-wide logging helpers for the fleet ledger.

Structure:
    * configure_root_logger - attach the shared handler and set the level.
    * get_logger - factory returning module loggers with baseline setup.

Usage:
    Modules import ``get_logger`` and keep a module level ``LOGGER``. The
    entry point calls ``configure_root_logger`` with the configured level;
    repeated calls only adjust the level so the handler is never duplicated
    and log lines do not repeat on the terminal alongside the menu.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once, re-levelling it on later calls."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper() if isinstance(level, str) else level)
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
