"""Edge builder: connect coordinate groups that share an identity key.

Matched event pairs are grouped by the coordinates of both ends, so
several people recorded at the same two places collapse into one line
whose endpoints are merged exactly like markers.  A pair whose two ends
fall on the same coordinate key yields no edge.
"""

from __future__ import annotations

from collections.abc import Sequence

from ancestry_map.clustering import coordinate_key, merge_events
from ancestry_map.config.pipeline import PipelineConfig
from ancestry_map.matching.candidate_pairs import PairGenerator, get_pair_generator
from ancestry_map.models import Edge, Event

EdgeKey = tuple[float, float, float, float]


def build_edges(
    events: Sequence[Event],
    config: PipelineConfig | None = None,
    pair_generator: PairGenerator | None = None,
    pairs: Sequence[tuple[int, int]] | None = None,
) -> list[Edge]:
    """Build one edge per distinct pair of endpoint coordinates.

    Args:
        events: Year-sorted events from the record parser.
        config: Pipeline configuration (pair strategy, snapping).
        pair_generator: Overrides the configured pair strategy.
        pairs: Precomputed candidate pairs; skips generation entirely.

    Returns:
        Edges in order of first occurrence of each coordinate pair.
    """
    if config is None:
        config = PipelineConfig()
    if pairs is None:
        generate = pair_generator or get_pair_generator(config.matching.pair_strategy)
        pairs = generate(events)
    snap = config.clustering.snap_decimals

    groups: dict[EdgeKey, tuple[list[Event], list[Event]]] = {}
    for i, j in pairs:
        x, y = events[i], events[j]
        x_key = coordinate_key(x, snap)
        y_key = coordinate_key(y, snap)
        if x_key == y_key:
            continue
        sources, targets = groups.setdefault(x_key + y_key, ([], []))
        sources.append(x)
        targets.append(y)

    return [
        Edge(source=merge_events(sources), target=merge_events(targets))
        for sources, targets in groups.values()
    ]
