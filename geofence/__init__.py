"""Planar geofencing primitive.

Holds a schema-validated polygon and answers point-in-polygon queries
using the even-odd ray-casting rule.  Intended to be embedded in a larger
application, e.g. filtering listings by service area.
"""

from geofence.models.outcome import Accepted, Rejected
from geofence.models.polygon import Point, Polygon
from geofence.pip import point_in_polygon
from geofence.store import PolygonStore

__version__ = "0.1.0"

__all__ = [
    "Accepted",
    "Point",
    "Polygon",
    "PolygonStore",
    "Rejected",
    "point_in_polygon",
]
