"""Geofence exception taxonomy.

Every domain exception inherits from ``GeofenceError`` and carries
structured context fields, so callers that log or report errors get the
same stable payload regardless of where the error was raised.

Taxonomy categories
-------------------
- ``ValidationError``: input/contract violations, never retryable.
- ``SchemaError``: polygon data rejected by the store's schema.

Schema errors never escape ``PolygonStore.set_polygon``: the store
reduces them to a log message and a ``Rejected`` outcome.  They are
raised by ``geofence.schema.validate_polygon`` for callers that want
the strict behaviour.
"""

from __future__ import annotations


class GeofenceError(Exception):
    """Base exception for all geofence-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Operation where the error occurred (e.g. ``"set_polygon"``).
        code: Machine-readable error code (e.g. ``"SCHEMA_TYPE"``).
        retryable: Whether repeating the operation could succeed.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, SchemaError):
            return "schema"
        if isinstance(self, ValidationError):
            return "validation"
        return "transient" if self.retryable else "permanent"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "retryable": self.retryable,
        }


class ValidationError(GeofenceError):
    """Input or domain-model validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Polygon schema errors
# ---------------------------------------------------------------------------


class SchemaError(ValidationError):
    """Polygon candidate does not match the store's schema."""

    default_stage = "set_polygon"
    default_code = "SCHEMA_INVALID"


class SchemaTypeError(SchemaError):
    """Candidate is not a structured record (mapping) at all.

    Attributes:
        observed_type: Python type name of the rejected candidate.
    """

    default_code = "SCHEMA_TYPE"

    def __init__(self, message: str, observed_type: str) -> None:
        self.observed_type = observed_type
        super().__init__(message)


class SchemaMissingKeyError(SchemaError):
    """One or more required keys are absent from the candidate.

    Attributes:
        missing_keys: Required keys not found, in schema order.
    """

    default_code = "SCHEMA_MISSING_KEY"

    def __init__(self, message: str, missing_keys: tuple[str, ...]) -> None:
        self.missing_keys = missing_keys
        super().__init__(message)


class SchemaTypeMismatchError(SchemaError):
    """One or more keys hold a value of the wrong category.

    Attributes:
        mismatches: ``{key: (actual_category, expected_category)}`` for
            every offending key, in candidate order.
    """

    default_code = "SCHEMA_TYPE_MISMATCH"

    def __init__(self, message: str, mismatches: dict[str, tuple[str, str]]) -> None:
        self.mismatches = mismatches
        super().__init__(message)
