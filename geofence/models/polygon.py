"""Data models for a geofence polygon and a query point.

A Polygon is two index-paired coordinate sequences: vertex *i* is
``(vertices_x[i], vertices_y[i])``.  Coordinates are planar; longitude
is x and latitude is y.  No geodesic correction is applied anywhere.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from geofence.geometry import compute_bounds

if TYPE_CHECKING:
    from geofence.models.contracts import PolygonPayload


@dataclass(frozen=True, slots=True)
class Polygon:
    """A single simple polygon given as parallel vertex arrays.

    The sequences are held as given: the store hands over the exact
    objects it accepted, without copying or coercing them.

    Attributes:
        vertices_x: X (longitude) coordinates of the vertices.
        vertices_y: Y (latitude) coordinates of the vertices.
    """

    vertices_x: Sequence[float] = field(default_factory=list)
    vertices_y: Sequence[float] = field(default_factory=list)

    @property
    def vertex_count(self) -> int:
        """Number of complete ``(x, y)`` pairs.

        Unequal arrays are not rejected; the surplus of the longer one
        is ignored.
        """
        return min(len(self.vertices_x), len(self.vertices_y))

    @property
    def is_empty(self) -> bool:
        """Whether the polygon has no complete vertex."""
        return self.vertex_count == 0

    @property
    def is_balanced(self) -> bool:
        """Whether both vertex arrays have the same length."""
        return len(self.vertices_x) == len(self.vertices_y)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box ``(min_x, min_y, max_x, max_y)``.

        Raises:
            ValueError: If the polygon is empty.
        """
        return compute_bounds(self.vertices_x, self.vertices_y)

    def vertices(self) -> list[tuple[float, float]]:
        """Return the complete vertex pairs as ``(x, y)`` tuples."""
        return list(zip(self.vertices_x, self.vertices_y, strict=False))

    def to_dict(self) -> PolygonPayload:
        """Serialise to the ``PolygonPayload`` mapping shape."""
        return {
            "vertices_x": list(self.vertices_x),
            "vertices_y": list(self.vertices_y),
        }

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> Polygon:
        """Deserialise from a ``PolygonPayload`` mapping.

        This does no schema validation beyond the sequence check; go
        through ``PolygonStore.set_polygon`` for untrusted data.

        Raises:
            TypeError: If a vertex field is not a list or tuple.
        """
        vertices_x = data.get("vertices_x", [])
        if not isinstance(vertices_x, list | tuple):
            msg = f"vertices_x must be a list, got {type(vertices_x).__name__}"
            raise TypeError(msg)

        vertices_y = data.get("vertices_y", [])
        if not isinstance(vertices_y, list | tuple):
            msg = f"vertices_y must be a list, got {type(vertices_y).__name__}"
            raise TypeError(msg)

        return cls(vertices_x=vertices_x, vertices_y=vertices_y)


@dataclass(frozen=True, slots=True)
class Point:
    """A query coordinate.

    No range check is applied; callers supply sensible values.

    Attributes:
        longitude: X coordinate.
        latitude: Y coordinate.
    """

    longitude: float
    latitude: float

    @property
    def x(self) -> float:
        return self.longitude

    @property
    def y(self) -> float:
        return self.latitude
