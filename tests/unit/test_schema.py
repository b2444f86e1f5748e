"""Unit tests for polygon schema validation.

Covers:
- Value-category classification
- Schema derived from the default Polygon shape
- Non-mapping candidates, missing keys (singular/plural), category mismatches
- All mismatches reported in a single message
- Accepted candidates are wrapped without copying
- Array-likes (len + indexing) count as sequences
"""

from __future__ import annotations

from collections import OrderedDict

import pytest

from geofence.core.exceptions import (
    SchemaError,
    SchemaMissingKeyError,
    SchemaTypeError,
    SchemaTypeMismatchError,
)
from geofence.models.polygon import Polygon
from geofence.schema import POLYGON_SCHEMA, PolygonSchema, validate_polygon, value_category


class TestValueCategory:
    """Runtime values map to coarse categories."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ([], "sequence"),
            ([1.0, 2.0], "sequence"),
            ((1, 2), "sequence"),
            ({}, "mapping"),
            (OrderedDict(), "mapping"),
            (1, "number"),
            (1.5, "number"),
            ("abc", "string"),
            (b"abc", "string"),
            (True, "boolean"),
            (None, "null"),
        ],
    )
    def test_categories(self, value: object, expected: str) -> None:
        assert value_category(value) == expected

    def test_unknown_type_uses_type_name(self) -> None:
        assert value_category({1, 2}) == "set"
        assert value_category(object()) == "object"


class TestPolygonSchema:
    """The schema comes from the default Polygon."""

    def test_required_keys(self) -> None:
        assert POLYGON_SCHEMA.required_keys == ("vertices_x", "vertices_y")

    def test_expected_categories(self) -> None:
        assert POLYGON_SCHEMA.fields == {"vertices_x": "sequence", "vertices_y": "sequence"}

    def test_from_model_matches_module_schema(self) -> None:
        assert PolygonSchema.from_model(Polygon()) == POLYGON_SCHEMA

    def test_validate_returns_candidate_unchanged(self) -> None:
        candidate = {"vertices_x": [1.0], "vertices_y": [2.0]}
        assert POLYGON_SCHEMA.validate(candidate) is candidate


class TestNotAMapping:
    """Candidates that are not structured records."""

    @pytest.mark.parametrize(
        ("candidate", "type_name"),
        [(42, "int"), ("polygon", "str"), ([[0, 0], [1, 1]], "list"), (None, "NoneType")],
    )
    def test_rejected_with_type_name(self, candidate: object, type_name: str) -> None:
        with pytest.raises(SchemaTypeError, match="expected a structured record") as exc_info:
            validate_polygon(candidate)
        assert exc_info.value.observed_type == type_name
        assert exc_info.value.message.endswith(f"got {type_name}.")

    def test_reference_names_the_caller(self) -> None:
        with pytest.raises(SchemaTypeError, match=r"^Zone\.load\(\) expected"):
            validate_polygon(3.0, reference="Zone.load()")


class TestMissingKeys:
    """Required keys absent from the candidate."""

    def test_missing_vertices_y(self) -> None:
        with pytest.raises(SchemaMissingKeyError) as exc_info:
            validate_polygon({"vertices_x": [0.0, 1.0, 1.0]})
        err = exc_info.value
        assert err.missing_keys == ("vertices_y",)
        assert "these keys: vertices_x, vertices_y" in err.message
        assert "missing key is vertices_y." in err.message

    def test_missing_both_pluralised(self) -> None:
        with pytest.raises(SchemaMissingKeyError) as exc_info:
            validate_polygon({"lat": [], "lon": []})
        err = exc_info.value
        assert err.missing_keys == ("vertices_x", "vertices_y")
        assert "missing keys are vertices_x, vertices_y." in err.message

    def test_empty_mapping(self) -> None:
        with pytest.raises(SchemaMissingKeyError, match="keys are"):
            validate_polygon({})

    def test_missing_checked_before_mismatch(self) -> None:
        with pytest.raises(SchemaMissingKeyError):
            validate_polygon({"vertices_x": 5})


class TestTypeMismatch:
    """Present keys holding the wrong category of value."""

    def test_scalar_vertices_x(self) -> None:
        with pytest.raises(SchemaTypeMismatchError) as exc_info:
            validate_polygon({"vertices_x": 5, "vertices_y": [0.0]})
        err = exc_info.value
        assert err.mismatches == {"vertices_x": ("number", "sequence")}
        assert "vertices_x=>(number instead of sequence)" in err.message

    def test_all_mismatches_reported(self) -> None:
        with pytest.raises(SchemaTypeMismatchError) as exc_info:
            validate_polygon({"vertices_x": "1,2,3", "vertices_y": {"a": 1}})
        assert exc_info.value.message.endswith(
            "mismatched set: vertices_x=>(string instead of sequence), "
            "vertices_y=>(mapping instead of sequence)"
        )

    def test_none_value(self) -> None:
        with pytest.raises(SchemaTypeMismatchError, match=r"vertices_y=>\(null instead of sequence\)"):
            validate_polygon({"vertices_x": [], "vertices_y": None})

    def test_extra_keys_are_not_checked(self) -> None:
        polygon = validate_polygon({"vertices_x": [], "vertices_y": [], "name": 7})
        assert polygon == Polygon()


class TestAccepted:
    """Well-formed candidates become a Polygon."""

    def test_arrays_are_not_copied(self) -> None:
        xs = [0.0, 10.0, 10.0]
        ys = [0.0, 0.0, 10.0]
        polygon = validate_polygon({"vertices_x": xs, "vertices_y": ys})
        assert polygon.vertices_x is xs
        assert polygon.vertices_y is ys

    def test_unequal_lengths_accepted(self) -> None:
        polygon = validate_polygon({"vertices_x": [0.0, 1.0, 2.0], "vertices_y": [0.0]})
        assert polygon.vertex_count == 1

    def test_tuples_accepted(self) -> None:
        polygon = validate_polygon({"vertices_x": (0, 1, 1), "vertices_y": (0, 0, 1)})
        assert polygon.vertex_count == 3

    def test_schema_errors_share_base(self) -> None:
        for candidate in (1, {}, {"vertices_x": 1, "vertices_y": 2}):
            with pytest.raises(SchemaError):
                validate_polygon(candidate)


class _CoordinateArray:
    """Minimal array-like: len and indexing, but not a registered Sequence."""

    def __init__(self, *values: float, ndim: int = 1) -> None:
        self._values = list(values)
        self.ndim = ndim

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> float:
        return self._values[index]


class TestArrayLikes:
    """Array-likes that are not collections.abc.Sequence."""

    def test_array_like_is_sequence(self) -> None:
        assert value_category(_CoordinateArray(1.0, 2.0)) == "sequence"

    def test_zero_dimensional_is_not_sequence(self) -> None:
        assert value_category(_CoordinateArray(ndim=0)) == "_CoordinateArray"

    def test_array_like_accepted(self) -> None:
        xs = _CoordinateArray(0.0, 10.0, 10.0)
        polygon = validate_polygon({"vertices_x": xs, "vertices_y": [0.0, 0.0, 10.0]})
        assert polygon.vertices_x is xs

    def test_numpy_arrays_accepted(self) -> None:
        np = pytest.importorskip("numpy")
        polygon = validate_polygon(
            {
                "vertices_x": np.array([0.0, 10.0, 10.0, 0.0]),
                "vertices_y": np.array([0.0, 0.0, 10.0, 10.0]),
            }
        )
        assert polygon.vertex_count == 4

    def test_numpy_zero_dimensional_rejected(self) -> None:
        np = pytest.importorskip("numpy")
        with pytest.raises(
            SchemaTypeMismatchError, match=r"vertices_x=>\(ndarray instead of sequence\)"
        ):
            validate_polygon({"vertices_x": np.array(5.0), "vertices_y": []})
