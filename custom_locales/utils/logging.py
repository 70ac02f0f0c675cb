"""Logging helpers.

Every module logs through a child of the ``custom_locales`` package logger.
The package logger owns the single stream handler; children propagate to it.
The level is re-read from ``CUSTOM_LOCALES_LOG_LEVEL`` whenever a logger is
requested, so tests and the CLI can change it after import.
"""
from __future__ import annotations

import logging
import threading

from custom_locales import config as app_config

ROOT_LOGGER_NAME = "custom_locales"
LOG_FORMAT = "[custom_locales] %(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False
_configure_lock = threading.Lock()


def _package_logger() -> logging.Logger:
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root
    with _configure_lock:
        if not _configured:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            root.addHandler(handler)
            root.propagate = False
            _configured = True
    return root


def get_logger(name: str = "") -> logging.Logger:
    """Return ``custom_locales.<name>``, or the package logger for an empty name."""
    root = _package_logger()
    root.setLevel(getattr(logging, app_config.log_level_name(), logging.INFO))
    suffix = name[len(ROOT_LOGGER_NAME):].lstrip(".") if name.startswith(ROOT_LOGGER_NAME) else name
    return root.getChild(suffix) if suffix else root


__all__ = ["get_logger"]
