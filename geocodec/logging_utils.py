"""Mini README: Package-wide logging helpers for geocodec.

Structure:
    * get_logger - factory returning module loggers with baseline config.
    * configure_root_logger - install the shared handler and adjust level.

Usage:
    Converter modules call ``get_logger(__name__)`` at import time and log
    decode outcomes at DEBUG level. The CLI calls ``configure_root_logger``
    with the configured level so that repeated invocations inside one
    process never stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once, updating the level on later calls."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
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
    """Return a module-specific logger."""

    return logging.getLogger(name)
