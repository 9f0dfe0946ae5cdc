"""
Per-logger level setup for refcal_lite.

``_init_logging`` in the package ``__init__`` installs the console handler;
this module only decides levels: package loggers follow the debug switch,
third-party loggers stay at WARNING.
"""

import logging
import os
from typing import Optional

# Package loggers that carry per-event diagnostics (dropped blocks, fallbacks)
PACKAGE_LOGGERS = (
    "refcal_lite",
    "refcal_lite.calendar",
    "refcal_lite.domain",
    "refcal_lite.core",
)

QUIET_LOGGERS = ("icalendar",)

_DEBUG_VALUES = ("1", "true", "yes", "on")
_ROOT_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR")


def _debug_requested(debug_mode: bool, force_debug: Optional[bool]) -> bool:
    if force_debug is not None:
        return force_debug
    if os.getenv("REFCAL_DEBUG", "").strip().lower() in _DEBUG_VALUES:
        return True
    return debug_mode


def configure_lite_logging(debug_mode: bool = False, force_debug: Optional[bool] = None) -> None:
    """
    Apply refcal_lite logger levels.

    Args:
        debug_mode: DEBUG for the package loggers, usually ``Config.debug``
        force_debug: Wins over both ``debug_mode`` and ``REFCAL_DEBUG`` when not None

    Environment Variables:
        REFCAL_DEBUG: '1', 'true', 'yes' or 'on' turns debug on
        REFCAL_LOG_LEVEL: Root level (DEBUG, INFO, WARNING, ERROR)
    """
    debug = _debug_requested(debug_mode, force_debug)
    package_level = logging.DEBUG if debug else logging.INFO

    root_level = package_level
    env_level = os.getenv("REFCAL_LOG_LEVEL", "").strip().upper()
    if env_level in _ROOT_LEVEL_NAMES:
        root_level = logging.getLevelName(env_level)
    logging.getLogger().setLevel(root_level)

    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(package_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Package loggers at %s, root at %s",
        logging.getLevelName(package_level),
        logging.getLevelName(root_level),
    )


def reset_logging_to_debug() -> None:
    """Put the root, package and third-party loggers at DEBUG for troubleshooting."""
    for name in ("", *PACKAGE_LOGGERS, *QUIET_LOGGERS):
        logging.getLogger(name).setLevel(logging.DEBUG)

    logging.getLogger(__name__).info("All refcal_lite loggers reset to DEBUG")


def get_logging_status() -> dict[str, str]:
    """
    Report configured levels.

    Returns:
        Level name per logger, ``root`` for the root logger
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}
    for name in (*PACKAGE_LOGGERS, *QUIET_LOGGERS):
        status[name] = logging.getLevelName(logging.getLogger(name).level)
    return status
