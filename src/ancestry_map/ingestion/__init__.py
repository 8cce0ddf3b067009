"""Typed event records from tokenized rows."""

from ancestry_map.ingestion.record_parser import ParsedRow, ParseResult, mk_data, parse_row

__all__ = ["mk_data", "parse_row", "ParsedRow", "ParseResult"]
