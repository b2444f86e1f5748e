"""Point-in-polygon test (even-odd ray casting).

Casts a horizontal ray from the query point toward +x and counts how many
polygon edges it crosses; an odd count means inside.  Edges run from each
vertex to the one before it, wrapping from the first vertex back to the
last, so the ring does not need to be explicitly closed.

Points exactly on the boundary get whatever the crossing formula yields.
For the square ``x=[0, 10, 10, 0]``, ``y=[0, 0, 10, 10]`` that is
``True`` at ``(0, 0)`` and ``False`` at ``(10, 10)``.

Reference:
    W. Randolph Franklin, "PNPOLY - Point Inclusion in Polygon Test"
    https://wrfranklin.org/Research/Short_Notes/pnpoly.html
"""

from __future__ import annotations

from collections.abc import Sequence


def point_in_polygon(
    vertices_x: Sequence[float],
    vertices_y: Sequence[float],
    x: float,
    y: float,
) -> bool:
    """Return whether ``(x, y)`` is inside the polygon under the even-odd rule.

    Args:
        vertices_x: X coordinates of the vertices.
        vertices_y: Y coordinates of the vertices, index-paired with
            ``vertices_x``.  If the lengths differ, only the first
            ``min(len(vertices_x), len(vertices_y))`` vertices are used.
        x: Query x (longitude).
        y: Query y (latitude).

    Returns:
        ``False`` for a polygon with no vertices.
    """
    n = min(len(vertices_x), len(vertices_y))
    inside = False

    j = n - 1
    for i in range(n):
        xi, yi = vertices_x[i], vertices_y[i]
        xj, yj = vertices_x[j], vertices_y[j]

        # yi == yj fails the straddle test, so the division is never by zero.
        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside

        j = i

    return inside
