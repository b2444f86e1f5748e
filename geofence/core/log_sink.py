"""Diagnostic log sink for rejected polygon data.

The store only needs something with a ``log(message)`` method.  This
module resolves the concrete destination from configuration, in order:

1. ``GeofenceConfig.error_log_path`` (``GEOFENCE_ERROR_LOG``), if non-empty;
2. ``GeofenceConfig.fallback_log_path`` (``GEOFENCE_LOG_LOCATION``), if non-empty;
3. standard error.

Each destination gets its own child of the ``geofence.diagnostics``
logger, so two stores pointed at different files never write into each
other's file.  These loggers propagate: host logging configuration sees
every rejection.  The stderr destination attaches no handler of its own
and relies on the host's handlers, or on ``logging.lastResort`` when the
host has configured none.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Protocol, runtime_checkable

from geofence.core.config import GeofenceConfig

LOGGER_NAME = "geofence.diagnostics"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

STDERR = "<stderr>"


@runtime_checkable
class LogSink(Protocol):
    """Anything that accepts a diagnostic message."""

    def log(self, message: str) -> None: ...


class LoggerSink:
    """``LogSink`` backed by a ``logging.Logger``.

    Messages are emitted at ERROR level, since every message that reaches
    the sink describes data that was refused.
    """

    def __init__(self, logger: logging.Logger, destination: str = "") -> None:
        self.logger = logger
        self.destination = destination

    def log(self, message: str) -> None:
        self.logger.error(message)

    def close(self) -> None:
        """Detach and close the destination's handlers.

        The logger is shared by every sink resolved for the same
        destination, so this releases the file for all of them.  Later
        messages still propagate to the host's handlers.
        """
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

    def __repr__(self) -> str:
        return f"LoggerSink(destination={self.destination!r})"


class MemorySink:
    """``LogSink`` that keeps messages in a list.

    Useful for hosts that surface diagnostics themselves, and for tests.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


def resolve_log_destination(config: GeofenceConfig) -> str:
    """Return the file path diagnostics should go to, or ``STDERR``."""
    if config.error_log_path:
        return config.error_log_path
    if config.fallback_log_path:
        return config.fallback_log_path
    return STDERR


def destination_logger_name(destination: str) -> str:
    """Logger name for a destination, e.g. ``geofence.diagnostics.stderr``."""
    if destination == STDERR:
        return f"{LOGGER_NAME}.stderr"
    key = re.sub(r"[^0-9A-Za-z]+", "_", os.path.abspath(destination)).strip("_")
    return f"{LOGGER_NAME}.file.{key}"


def resolve_log_sink(config: GeofenceConfig | None = None) -> LoggerSink:
    """Build a ``LoggerSink`` for the configured destination.

    A file handler is attached once per destination; resolving the same
    destination again reuses it.

    Args:
        config: Configuration to resolve from.  Defaults to the log paths
            alone (``GeofenceConfig.log_paths_from_env()``), so unrelated
            settings can never make resolution fail.
    """
    if config is None:
        config = GeofenceConfig.log_paths_from_env()

    destination = resolve_log_destination(config)
    logger = logging.getLogger(destination_logger_name(destination))
    logger.setLevel(config.log_level_number)
    logger.propagate = True

    if destination != STDERR:
        path = os.path.abspath(destination)
        attached = any(
            isinstance(h, logging.FileHandler) and h.baseFilename == path
            for h in logger.handlers
        )
        if not attached:
            handler = logging.FileHandler(path, encoding="utf-8", delay=True)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)

    return LoggerSink(logger, destination)
