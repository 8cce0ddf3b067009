"""Candidate pair generators for edge building.

A pair ``(i, j)`` always has ``i < j`` and refers to two distinct events
in the year-sorted event list whose identity keys are equal.  Both
generators return the same pairs in the same ``(i, j)`` order, so the
edge builder does not care which one runs.

``triangular_pairs`` is the straightforward self-join over the strict
upper triangle of the event cross product: O(n^2) comparisons, fine for
tens to low hundreds of rows.  ``keyed_pairs`` buckets events by identity
key first and only compares within a bucket.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ancestry_map.models import Event, IdentityKey


class PairGenerator(Protocol):
    def __call__(self, events: Sequence[Event]) -> list[tuple[int, int]]: ...


@dataclass
class CandidatePairStats:
    """Statistics about candidate pair generation.

    Attributes:
        total_events: Number of input events.
        total_possible_pairs: ``n * (n - 1) / 2`` distinct pairs.
        matched_pairs: Pairs sharing an identity key.
    """

    total_events: int
    total_possible_pairs: int
    matched_pairs: int


def triangular_pairs(events: Sequence[Event]) -> list[tuple[int, int]]:
    """All ``i < j`` pairs with equal identity keys, by nested iteration."""
    pairs: list[tuple[int, int]] = []
    for i in range(len(events)):
        for j in range(i + 1, len(events)):
            if events[i].identity == events[j].identity:
                pairs.append((i, j))
    return pairs


def keyed_pairs(events: Sequence[Event]) -> list[tuple[int, int]]:
    """Same result as ``triangular_pairs`` via an identity-key hash join."""
    # Build index: identity key -> positions of events that carry it
    index: dict[IdentityKey, list[int]] = {}
    for position, event in enumerate(events):
        index.setdefault(event.identity, []).append(position)

    pairs: list[tuple[int, int]] = []
    for positions in index.values():
        for a in range(len(positions)):
            for b in range(a + 1, len(positions)):
                pairs.append((positions[a], positions[b]))
    return sorted(pairs)


_GENERATORS: dict[str, PairGenerator] = {
    "triangular": triangular_pairs,
    "keyed": keyed_pairs,
}


def get_pair_generator(strategy: str) -> PairGenerator:
    try:
        return _GENERATORS[strategy]
    except KeyError:
        raise ValueError(f"unknown pair strategy {strategy!r}") from None


def pair_stats(events: Sequence[Event], pairs: Sequence[tuple[int, int]]) -> CandidatePairStats:
    n = len(events)
    return CandidatePairStats(
        total_events=n,
        total_possible_pairs=n * (n - 1) // 2,
        matched_pairs=len(pairs),
    )
