"""Group events by coordinates and merge each group into a marker.

Grouping is exact float equality unless ``ClusteringConfig.snap_decimals``
is set, in which case coordinates are rounded for the grouping key only.
Groups come out in order of first occurrence in the input.
"""

from __future__ import annotations

from collections.abc import Sequence

from ancestry_map.config.pipeline import ClusteringConfig
from ancestry_map.models import Event, Marker

Coordinate = tuple[float, float]


def coordinate_key(item: Event | Marker, snap_decimals: int | None = None) -> Coordinate:
    """Return the ``(latitude, longitude)`` grouping key of an event or marker."""
    if snap_decimals is None:
        return item.latitude, item.longitude
    return round(item.latitude, snap_decimals), round(item.longitude, snap_decimals)


def merge_events(group: Sequence[Event]) -> Marker:
    """Merge a non-empty group into one marker.

    The first event's coordinates win, titles are joined one per line in
    group order, and the weight is the group minimum.
    """
    if not group:
        raise ValueError("cannot merge an empty event group")
    first = group[0]
    return Marker(
        latitude=first.latitude,
        longitude=first.longitude,
        title="\n".join(e.title for e in group),
        weight=min(e.weight for e in group),
    )


def cluster_events(
    events: Sequence[Event], config: ClusteringConfig | None = None
) -> list[Marker]:
    """Cluster events into one marker per distinct coordinate pair."""
    if config is None:
        config = ClusteringConfig()

    groups: dict[Coordinate, list[Event]] = {}
    for event in events:
        groups.setdefault(coordinate_key(event, config.snap_decimals), []).append(event)

    return [merge_events(group) for group in groups.values()]
