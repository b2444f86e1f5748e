"""Data models.

- Polygon: Parallel x/y vertex arrays of a geofence
- Point: A query coordinate
- Accepted / Rejected: Outcome of replacing the stored polygon
- PolygonPayload: Mapping shape accepted by the store
"""

from geofence.models.contracts import PolygonPayload
from geofence.models.outcome import Accepted, Rejected, SetOutcome
from geofence.models.polygon import Point, Polygon

__all__ = [
    "Accepted",
    "Point",
    "Polygon",
    "PolygonPayload",
    "Rejected",
    "SetOutcome",
]
