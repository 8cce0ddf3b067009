"""Raw text splitting and year normalisation."""

from ancestry_map.preprocessing.normalizer import YearRange, compute_year_range, normalized_weight
from ancestry_map.preprocessing.tokenizer import parse, split_columns, split_lines

__all__ = [
    "compute_year_range",
    "normalized_weight",
    "parse",
    "split_columns",
    "split_lines",
    "YearRange",
]
