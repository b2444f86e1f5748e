"""Geometry helpers for a stored polygon.

- ``compute_bounds``: planar bounding box of the vertex arrays
- ``to_shapely``: hand a polygon to the wider shapely-based stack

Neither is used by the containment test itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shapely.geometry import Polygon as ShapelyPolygon

if TYPE_CHECKING:
    from collections.abc import Sequence

    from geofence.models.polygon import Polygon

# A ring needs three distinct corners to enclose any area.
MIN_POLYGON_VERTICES = 3


def compute_bounds(
    vertices_x: Sequence[float], vertices_y: Sequence[float]
) -> tuple[float, float, float, float]:
    """Compute ``(min_x, min_y, max_x, max_y)`` over the complete vertex pairs.

    Raises:
        ValueError: If there is no complete vertex pair.
    """
    n = min(len(vertices_x), len(vertices_y))
    if n == 0:
        msg = "Cannot compute bounds of an empty polygon"
        raise ValueError(msg)

    xs = vertices_x[:n]
    ys = vertices_y[:n]
    return (min(xs), min(ys), max(xs), max(ys))


def to_shapely(polygon: Polygon) -> ShapelyPolygon:
    """Convert a ``Polygon`` into a shapely ``Polygon``.

    shapely closes the ring itself; unequal vertex arrays are truncated
    to the shorter one, as in the containment test.

    Raises:
        ValueError: If the polygon has fewer than three vertex pairs.
    """
    coords = polygon.vertices()
    if len(coords) < MIN_POLYGON_VERTICES:
        msg = (
            f"Polygon has only {len(coords)} vertex pair(s), "
            f"need at least {MIN_POLYGON_VERTICES}"
        )
        raise ValueError(msg)
    return ShapelyPolygon(coords)
