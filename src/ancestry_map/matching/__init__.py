"""Edge inference between events that share an identity key."""

from ancestry_map.matching.candidate_pairs import (
    CandidatePairStats,
    PairGenerator,
    get_pair_generator,
    keyed_pairs,
    pair_stats,
    triangular_pairs,
)
from ancestry_map.matching.edges import build_edges

__all__ = [
    "build_edges",
    "CandidatePairStats",
    "get_pair_generator",
    "keyed_pairs",
    "pair_stats",
    "PairGenerator",
    "triangular_pairs",
]
