"""Parsed genealogy event records.

Events are immutable: every reload rebuilds them from the raw text and
nothing downstream edits them in place.
"""

from __future__ import annotations

from dataclasses import dataclass

# One tokenized input line: trimmed string fields in column order.
Row = list[str]


@dataclass(frozen=True, order=True)
class IdentityKey:
    """Who and when an event is about.

    Two rows with equal keys describe the same real-world event recorded
    at different places.  Compared field by field, so delimiter characters
    inside a name cannot cause accidental collisions.
    """

    name: str
    year: int

    def __str__(self) -> str:
        return f"{self.name} - {self.year}"


@dataclass(frozen=True)
class Event:
    """One geolocated record before any merging.

    Attributes:
        latitude: Value of the latitude column.
        longitude: Value of the longitude column.
        year: Parsed year.
        identity: Name + year, used only for edge matching.
        title: Display text for tooltips.
        weight: Normalised year in ``[0, 1]`` over the whole dataset.
    """

    latitude: float
    longitude: float
    year: int
    identity: IdentityKey
    title: str
    weight: float
