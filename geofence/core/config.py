"""Geofence configuration loaded from environment variables.

The host application owns where these values come from (app settings,
a ``.env`` file, the process environment); this module only reads them.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if a value cannot be
    used, so bad configuration surfaces at startup instead of at the
    first query.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any

from geofence.core.exceptions import GeofenceError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigValidationError(GeofenceError):
    """Raised when a configuration value is unusable.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of what is expected.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        self.message = message
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class GeofenceConfig:
    """Immutable geofence configuration.

    Every field is a plain string, so instances are hashable and can be
    shared freely.

    Attributes:
        error_log_path: Preferred file for rejection diagnostics.
        fallback_log_path: Used when ``error_log_path`` is empty.
        default_polygon_json: JSON object text of a polygon to load at
            startup, or ``""`` for none.  Its shape is validated by the
            store, not here.
        log_level: Level name for the diagnostic logger.
    """

    error_log_path: str = ""
    fallback_log_path: str = ""
    default_polygon_json: str = ""
    log_level: str = "WARNING"

    @property
    def default_polygon(self) -> dict[str, Any] | None:
        """The configured default polygon, decoded afresh on each access.

        Raises:
            ConfigValidationError: If the text is not a JSON object.
        """
        return _parse_polygon(self.default_polygon_json)

    @property
    def log_level_number(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]

    @classmethod
    def from_env(cls) -> GeofenceConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If ``GEOFENCE_DEFAULT_POLYGON`` is not a
                JSON object or ``GEOFENCE_LOG_LEVEL`` is not a level name.
        """
        config = cls(
            error_log_path=os.getenv("GEOFENCE_ERROR_LOG", "").strip(),
            fallback_log_path=os.getenv("GEOFENCE_LOG_LOCATION", "").strip(),
            default_polygon_json=os.getenv("GEOFENCE_DEFAULT_POLYGON", "").strip(),
            log_level=os.getenv("GEOFENCE_LOG_LEVEL", "WARNING").strip().upper(),
        )
        _validate(config)
        return config

    @classmethod
    def log_paths_from_env(cls) -> GeofenceConfig:
        """Load only the two log destination paths.

        Nothing else is read, so this never raises: a store that just
        needs somewhere to send diagnostics must not fail on unrelated
        settings.
        """
        return cls(
            error_log_path=os.getenv("GEOFENCE_ERROR_LOG", "").strip(),
            fallback_log_path=os.getenv("GEOFENCE_LOG_LOCATION", "").strip(),
        )


def _parse_polygon(raw: str) -> dict[str, Any] | None:
    if not raw.strip():
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigValidationError(
            "GEOFENCE_DEFAULT_POLYGON", raw, f"must be valid JSON ({exc.msg})"
        ) from exc
    if not isinstance(data, dict):
        raise ConfigValidationError(
            "GEOFENCE_DEFAULT_POLYGON",
            raw,
            f"must be a JSON object, got {type(data).__name__}",
        )
    return data


def _validate(config: GeofenceConfig) -> None:
    """Validate configuration values.  Raises ``ConfigValidationError``."""
    _parse_polygon(config.default_polygon_json)

    if config.log_level not in LOG_LEVELS:
        raise ConfigValidationError(
            "GEOFENCE_LOG_LEVEL",
            config.log_level,
            f"must be one of {', '.join(LOG_LEVELS)}",
        )
