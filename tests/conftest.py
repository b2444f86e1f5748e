"""Shared pytest fixtures for the geofence test suite."""

from __future__ import annotations

import pytest

from geofence.core.log_sink import MemorySink
from geofence.store import PolygonStore

# ---------------------------------------------------------------------------
# Reference polygons
# ---------------------------------------------------------------------------

# 10 x 10 axis-aligned square, counter-clockwise from the origin
SQUARE = {
    "vertices_x": [0.0, 10.0, 10.0, 0.0],
    "vertices_y": [0.0, 0.0, 10.0, 10.0],
}

# Rough service area around central Austin, TX (lon, lat)
SERVICE_AREA = {
    "vertices_x": [-97.80, -97.65, -97.60, -97.70, -97.85],
    "vertices_y": [30.20, 30.18, 30.32, 30.40, 30.33],
}


@pytest.fixture()
def square() -> dict[str, list[float]]:
    """A fresh copy of the 10 x 10 square payload."""
    return {key: list(values) for key, values in SQUARE.items()}


@pytest.fixture()
def service_area() -> dict[str, list[float]]:
    """A fresh copy of the lon/lat service-area payload."""
    return {key: list(values) for key, values in SERVICE_AREA.items()}


@pytest.fixture()
def sink() -> MemorySink:
    """In-memory log sink capturing rejection messages."""
    return MemorySink()


@pytest.fixture()
def store(sink: MemorySink) -> PolygonStore:
    """An empty store reporting to ``sink``."""
    return PolygonStore(log_sink=sink)
