"""Presentation entities produced by clustering and edge building."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Marker:
    """One or more events merged on identical coordinates.

    Attributes:
        latitude: Coordinates of the first merged event.
        longitude: Coordinates of the first merged event.
        title: Source event titles, one per line, in merge order.
        weight: Minimum weight among merged events.
    """

    latitude: float
    longitude: float
    title: str
    weight: float

    @property
    def title_lines(self) -> list[str]:
        return self.title.split("\n")


@dataclass(frozen=True)
class Edge:
    """A line between two merged endpoints sharing an identity key."""

    source: Marker
    target: Marker

    @property
    def weight(self) -> float:
        """Edges are coloured by the more recent endpoint."""
        return max(self.source.weight, self.target.weight)
