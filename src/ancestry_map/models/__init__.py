"""Typed records flowing through the pipeline."""

from ancestry_map.models.event import Event, IdentityKey, Row
from ancestry_map.models.marker import Edge, Marker

__all__ = ["Edge", "Event", "IdentityKey", "Marker", "Row"]
