"""Wire shape of a polygon.

``PolygonPayload`` is what ``Polygon.to_dict()`` produces and what
``PolygonStore.set_polygon`` expects to receive, e.g. from JSON
configuration or a request body.
"""

from __future__ import annotations

from typing import TypedDict


class PolygonPayload(TypedDict):
    """Serialised ``Polygon``: parallel x/y vertex arrays."""

    vertices_x: list[float]
    vertices_y: list[float]
