"""Tokenizer for tab/comma-delimited genealogy text.

Each line is split on the first configured separator (tab), then every
resulting piece is split again on the next one (comma), and so on.  There
is no quoting or escaping: a separator can never appear inside a value.
"""

from __future__ import annotations

from ancestry_map.config.pipeline import TokenizerConfig
from ancestry_map.models import Row


def split_lines(text: str, config: TokenizerConfig | None = None) -> list[str]:
    """Split text into lines, accepting any platform line ending.

    An empty string yields a single empty line.
    """
    if config is None:
        config = TokenizerConfig()

    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    if config.line_separator != "\n":
        normalized = normalized.replace("\n", config.line_separator)
    return normalized.split(config.line_separator)


def split_columns(line: str, config: TokenizerConfig | None = None) -> Row:
    """Split one line into trimmed fields."""
    if config is None:
        config = TokenizerConfig()

    pieces = [line]
    for sep in config.field_separators:
        pieces = [part for piece in pieces for part in piece.split(sep)]
    return [piece.strip() for piece in pieces]


def parse(text: str, config: TokenizerConfig | None = None) -> list[Row]:
    """Tokenize raw text into rows of trimmed string fields."""
    if config is None:
        config = TokenizerConfig()
    return [split_columns(line, config) for line in split_lines(text, config)]
