# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for viascan."""

from __future__ import annotations

import logging
import os

from .errors import ConfigurationError

DEFAULT_LOG_LEVEL = os.getenv("VIASCAN_LOG_LEVEL", "WARNING").upper()
ORIGIN_LOGGER_NAME = "viascan.origins"
ORIGIN_LOG_FORMAT = "%(origin)s: %(message)s"

_origin_logger = logging.getLogger(ORIGIN_LOGGER_NAME)
_origin_logger.addHandler(logging.NullHandler())
_origin_logger.propagate = False


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for CLI/library use."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def get_origin_logger() -> logging.Logger:
    """Logger receiving per-origin diagnostic lines."""
    return _origin_logger


def origin_adapter(origin: str, logger: logging.Logger | None = None) -> logging.LoggerAdapter:
    """Bind an origin name so every record renders as `<origin>: <message>`."""
    return logging.LoggerAdapter(logger or _origin_logger, {"origin": origin})


def open_origin_log(path: str, logger: logging.Logger | None = None) -> logging.FileHandler:
    """
    Attach a plain-text log file to the origin logger.

    The file is truncated on open. Failure to create it is a startup error.
    """
    target = logger or _origin_logger
    try:
        handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to create log file {path}: {exc}") from exc
    handler.setFormatter(logging.Formatter(ORIGIN_LOG_FORMAT))
    target.addHandler(handler)
    target.setLevel(logging.DEBUG)
    return handler


def close_origin_log(handler: logging.Handler, logger: logging.Logger | None = None) -> None:
    target = logger or _origin_logger
    target.removeHandler(handler)
    handler.close()


__all__ = [
    "close_origin_log",
    "get_origin_logger",
    "open_origin_log",
    "origin_adapter",
    "setup_logging",
]
