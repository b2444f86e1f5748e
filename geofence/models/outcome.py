"""Outcome of ``PolygonStore.set_polygon``.

``Accepted`` carries the polygon now held by the store; ``Rejected``
carries the diagnostic that was sent to the log sink and the schema
error behind it.  Both are truthy/falsy so callers can write
``if store.set_polygon(data): ...``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from geofence.core.exceptions import SchemaError
    from geofence.models.polygon import Polygon


@dataclass(frozen=True, slots=True)
class Accepted:
    """The candidate passed validation and replaced the stored polygon."""

    polygon: Polygon

    @property
    def accepted(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Rejected:
    """The candidate failed validation; the stored polygon is unchanged.

    Attributes:
        reason: The message emitted to the log sink.
        error: The schema error that caused the rejection.
    """

    reason: str
    error: SchemaError

    @property
    def accepted(self) -> bool:
        return False

    def __bool__(self) -> bool:
        return False


SetOutcome = Accepted | Rejected
