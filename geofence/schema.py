"""Polygon schema validation.

The schema is derived once from the shape of the default (empty)
``Polygon``: every field becomes a required key, and the value category
of its default becomes the expected category.  Validation then runs
three checks in order, each stopping the run if it fails:

1. the candidate is a mapping at all;
2. every schema key is present;
3. every schema key present in the candidate holds a value of the
   expected category.  All mismatches are reported together.

Only the category of a value is checked (``sequence`` vs ``number`` vs
``mapping`` ...), never its elements or length.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real

from geofence.core.exceptions import (
    SchemaMissingKeyError,
    SchemaTypeError,
    SchemaTypeMismatchError,
)
from geofence.models.polygon import Polygon

DEFAULT_REFERENCE = "PolygonStore.set_polygon(polygon)"


def _is_array_like(value: object) -> bool:
    kind = type(value)
    if not (hasattr(kind, "__len__") and hasattr(kind, "__getitem__")):
        return False
    # 0-d arrays define __len__ but refuse len().
    return getattr(value, "ndim", 1) >= 1


def value_category(value: object) -> str:
    """Classify a runtime value into a coarse category name.

    Strings and bytes are ``"string"``, not ``"sequence"``: a string of
    digits is never a vertex array.  Array-likes that support ``len`` and
    indexing but are not registered ``Sequence`` types (NumPy arrays, for
    one) are ``"sequence"``.  Unknown types fall back to their type name.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Real):
        return "number"
    if isinstance(value, str | bytes | bytearray):
        return "string"
    if isinstance(value, Mapping):
        return "mapping"
    if isinstance(value, Sequence) or _is_array_like(value):
        return "sequence"
    return type(value).__name__


@dataclass(frozen=True, slots=True)
class PolygonSchema:
    """Field name to expected value category.

    Attributes:
        fields: ``{key: category}`` in model field order.
    """

    fields: dict[str, str]

    @classmethod
    def from_model(cls, model: object) -> PolygonSchema:
        """Build a schema from a dataclass instance's field values."""
        return cls(
            fields={
                f.name: value_category(getattr(model, f.name))
                for f in dataclasses.fields(model)  # type: ignore[arg-type]
            }
        )

    @property
    def required_keys(self) -> tuple[str, ...]:
        return tuple(self.fields)

    def validate(
        self, candidate: object, *, reference: str = DEFAULT_REFERENCE
    ) -> Mapping[str, object]:
        """Check ``candidate`` against the schema and return it unchanged.

        Args:
            candidate: Data of unknown shape.
            reference: Caller name used as the subject of error messages.

        Raises:
            SchemaTypeError: ``candidate`` is not a mapping.
            SchemaMissingKeyError: One or more schema keys are absent.
            SchemaTypeMismatchError: One or more values have the wrong
                category.
        """
        if not isinstance(candidate, Mapping):
            observed = type(candidate).__name__
            msg = f"{reference} expected a structured record, got {observed}."
            raise SchemaTypeError(msg, observed_type=observed)

        missing = tuple(key for key in self.fields if key not in candidate)
        if missing:
            plural = " is" if len(missing) == 1 else "s are"
            msg = (
                f"{reference} requires the polygon to have these keys: "
                f"{', '.join(self.fields)}. Instead, its missing key{plural} "
                f"{', '.join(missing)}."
            )
            raise SchemaMissingKeyError(msg, missing_keys=missing)

        mismatches: dict[str, tuple[str, str]] = {}
        for key, value in candidate.items():
            expected = self.fields.get(key)
            if expected is None:
                continue
            actual = value_category(value)
            if actual != expected:
                mismatches[key] = (actual, expected)

        if mismatches:
            detail = ", ".join(
                f"{key}=>({actual} instead of {expected})"
                for key, (actual, expected) in mismatches.items()
            )
            msg = (
                f"{reference} requires the polygon values to have specific types. "
                f"Instead, it received a mismatched set: {detail}"
            )
            raise SchemaTypeMismatchError(msg, mismatches=mismatches)

        return candidate


POLYGON_SCHEMA = PolygonSchema.from_model(Polygon())
"""Schema of ``Polygon``: ``vertices_x`` and ``vertices_y`` as sequences."""


def validate_polygon(candidate: object, *, reference: str = DEFAULT_REFERENCE) -> Polygon:
    """Validate ``candidate`` and wrap its vertex arrays in a ``Polygon``.

    The arrays are not copied.  Keys outside the schema are ignored.
    Unequal array lengths are accepted.

    Raises:
        SchemaError: Any of the schema checks failed (see
            ``PolygonSchema.validate``).
    """
    data = POLYGON_SCHEMA.validate(candidate, reference=reference)
    return Polygon(
        vertices_x=data["vertices_x"],  # type: ignore[arg-type]
        vertices_y=data["vertices_y"],  # type: ignore[arg-type]
    )
