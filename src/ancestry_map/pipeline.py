"""Pipeline orchestrator.

Runs tokenize -> parse -> normalise -> cluster -> build edges on one raw
text blob.  PURE -- no rendering, no I/O beyond logging.  Either the whole
run succeeds and returns a ``PipelineResult`` or it raises, so callers
never see partially built markers or edges.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from ancestry_map.clustering import cluster_events
from ancestry_map.config.pipeline import PipelineConfig
from ancestry_map.errors import RowError
from ancestry_map.ingestion import mk_data
from ancestry_map.matching import build_edges, get_pair_generator, pair_stats
from ancestry_map.matching.candidate_pairs import CandidatePairStats
from ancestry_map.models import Edge, Event, Marker

logger = structlog.get_logger()


@dataclass
class PipelineResult:
    """Complete result of one load.

    Attributes:
        events: Year-sorted events.
        markers: One marker per distinct coordinate.
        edges: One edge per distinct coordinate pair sharing an identity.
        row_errors: Rows skipped as malformed.
        pair_stats: Candidate pair statistics for the edge builder.
        degenerate_range: True when all events share one year.
    """

    events: list[Event]
    markers: list[Marker]
    edges: list[Edge]
    row_errors: list[RowError] = field(default_factory=list)
    pair_stats: CandidatePairStats | None = None
    degenerate_range: bool = False


def run_pipeline(text: str, config: PipelineConfig | None = None) -> PipelineResult:
    """Turn raw delimited text into markers and edges.

    Raises:
        PipelineError: On an abort policy violation (malformed row or
            degenerate year range).
    """
    if config is None:
        config = PipelineConfig()

    parsed = mk_data(text, config)
    events = parsed.events
    markers = cluster_events(events, config.clustering)

    pairs = get_pair_generator(config.matching.pair_strategy)(events)
    edges = build_edges(events, config, pairs=pairs)
    stats = pair_stats(events, pairs)

    logger.info(
        "pipeline_complete",
        events=len(events),
        markers=len(markers),
        edges=len(edges),
        skipped_rows=len(parsed.row_errors),
        matched_pairs=stats.matched_pairs,
        pair_strategy=config.matching.pair_strategy,
    )

    return PipelineResult(
        events=events,
        markers=markers,
        edges=edges,
        row_errors=parsed.row_errors,
        pair_stats=stats,
        degenerate_range=parsed.degenerate_range,
    )
