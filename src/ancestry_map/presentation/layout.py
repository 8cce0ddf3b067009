"""Initial map view placement."""

from __future__ import annotations

import math
from collections.abc import Sequence

from ancestry_map.models import Marker


def _dist(a: Marker, b: Marker) -> float:
    return math.sqrt((a.longitude - b.longitude) ** 2 + (a.latitude - b.latitude) ** 2)


def center_point(markers: Sequence[Marker]) -> tuple[float, float] | None:
    """Return ``(longitude, latitude)`` of the most central marker.

    Picks the marker with the smallest summed Euclidean distance to all
    markers, measured in raw degrees.  Ties go to the earliest marker.
    Returns ``None`` when there are no markers.
    """
    if not markers:
        return None
    best = min(markers, key=lambda m: sum(_dist(m, other) for other in markers))
    return best.longitude, best.latitude
