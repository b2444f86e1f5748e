"""Polygon store: one geofence, validated on the way in.

``PolygonStore`` holds exactly one ``Polygon`` (two empty vertex arrays
until something valid is set) and answers containment queries against
it.  Replacement data goes through the schema in ``geofence.schema``;
anything that fails is reported to the log sink and otherwise ignored,
so bad input can never corrupt the polygon already in place.

The store does no locking.  Callers sharing one instance across threads
must serialise ``set_polygon`` against ``contains`` themselves.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geofence.core.exceptions import SchemaError
from geofence.core.log_sink import LogSink, resolve_log_sink
from geofence.models.outcome import Accepted, Rejected
from geofence.models.polygon import Point, Polygon
from geofence.pip import point_in_polygon
from geofence.schema import validate_polygon

if TYPE_CHECKING:
    from geofence.core.config import GeofenceConfig
    from geofence.models.outcome import SetOutcome

logger = logging.getLogger("geofence.store")


class PolygonStore:
    """Owns the current geofence polygon.

    Args:
        log_sink: Receives one message per rejected ``set_polygon`` call.
            Defaults to the sink for the ``GEOFENCE_ERROR_LOG`` /
            ``GEOFENCE_LOG_LOCATION`` paths (see ``geofence.core.log_sink``).
            No other setting is read here: the store starts empty, and a
            configured default polygon is only applied by ``from_config``.
    """

    def __init__(self, log_sink: LogSink | None = None) -> None:
        self._polygon = Polygon()
        self._log_sink = log_sink if log_sink is not None else resolve_log_sink()

    @classmethod
    def from_config(
        cls, config: GeofenceConfig, log_sink: LogSink | None = None
    ) -> PolygonStore:
        """Build a store from configuration.

        The configured default polygon, if any, is applied through
        ``set_polygon`` and is subject to the same validation.  An invalid
        default leaves the store empty and is reported to the sink.

        Raises:
            ConfigValidationError: If ``config.default_polygon_json`` is
                not a JSON object (only possible for a config built by
                hand, since ``GeofenceConfig.from_env`` checks it).
        """
        store = cls(log_sink if log_sink is not None else resolve_log_sink(config))
        default_polygon = config.default_polygon
        if default_polygon is not None:
            store.set_polygon(default_polygon)
        return store

    @property
    def polygon(self) -> Polygon:
        """The polygon currently in force."""
        return self._polygon

    @property
    def log_sink(self) -> LogSink:
        return self._log_sink

    def set_polygon(self, candidate: object) -> SetOutcome:
        """Replace the stored polygon with ``candidate`` if it is well-formed.

        ``candidate`` must be a mapping with ``vertices_x`` and
        ``vertices_y`` sequences.  Array-likes with ``len`` and indexing,
        such as NumPy arrays, count as sequences.  Nothing is raised on
        bad input: the reason goes to the log sink and the current
        polygon stays.

        Returns:
            ``Accepted`` with the new polygon, or ``Rejected`` with the
            message that was logged.
        """
        try:
            polygon = validate_polygon(candidate)
        except SchemaError as exc:
            self._log_sink.log(exc.message)
            return Rejected(reason=exc.message, error=exc)

        if not polygon.is_balanced:
            logger.warning(
                "Polygon accepted with unequal vertex arrays | x=%d | y=%d | using %d vertices",
                len(polygon.vertices_x),
                len(polygon.vertices_y),
                polygon.vertex_count,
            )

        self._polygon = polygon
        logger.info("Polygon accepted | vertices=%d", polygon.vertex_count)
        return Accepted(polygon)

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside the stored polygon (even-odd rule).

        Always ``False`` while the store holds the empty default polygon.
        """
        return point_in_polygon(
            self._polygon.vertices_x,
            self._polygon.vertices_y,
            point.longitude,
            point.latitude,
        )

    def contains_coordinate(self, longitude: float, latitude: float) -> bool:
        """Shorthand for ``contains(Point(longitude, latitude))``."""
        return self.contains(Point(longitude, latitude))

    def __repr__(self) -> str:
        return f"PolygonStore(vertices={self._polygon.vertex_count})"
