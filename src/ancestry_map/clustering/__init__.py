"""Coordinate clustering for map markers.

Groups events sharing a position and merges each group into one marker.
"""

from .coordinate_cluster import cluster_events, coordinate_key, merge_events

__all__ = ["cluster_events", "coordinate_key", "merge_events"]
