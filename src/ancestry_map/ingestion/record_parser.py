"""Record parser: tokenized rows to normalised, year-sorted events.

Column layout of a row::

    0 location | 1 longitude | 2 latitude | 3 year | 4 name | 5 note | 6 type

Columns 5 and 6 are optional.  A row whose year or coordinates do not
parse is malformed; it is either skipped with a recorded diagnostic or
aborts the whole load, depending on ``ParsingConfig.on_malformed_row``.
Skipped rows never contribute to the year range.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import structlog

from ancestry_map.config.pipeline import PipelineConfig
from ancestry_map.errors import (
    DegenerateYearRangeError,
    MalformedRowError,
    PipelineError,
    RowError,
)
from ancestry_map.models import Event, IdentityKey, Row
from ancestry_map.preprocessing.normalizer import (
    YearRange,
    compute_year_range,
    normalized_weight,
)
from ancestry_map.preprocessing.tokenizer import parse

logger = structlog.get_logger()

LOCATION = 0
LONGITUDE = 1
LATITUDE = 2
YEAR = 3
NAME = 4
NOTE = 5
TYPE = 6
MIN_COLUMNS = 5


@dataclass(frozen=True)
class ParsedRow:
    """A validated row, before weights are known."""

    row_index: int
    location: str
    longitude: float
    latitude: float
    year: int
    name: str
    note: str = ""
    kind: str = ""


@dataclass
class ParseResult:
    """Outcome of parsing one raw text blob.

    Attributes:
        events: Events sorted ascending by year (stable for ties).
        row_errors: Diagnostics for skipped rows, in input order.
        year_range: Range used for weights, ``None`` when no events.
        degenerate_range: True when every event shares one year.
    """

    events: list[Event] = field(default_factory=list)
    row_errors: list[RowError] = field(default_factory=list)
    year_range: YearRange | None = None
    degenerate_range: bool = False


def _field(row: Row, index: int) -> str:
    return row[index] if index < len(row) else ""


def _parse_coordinate(value: str, label: str, row_index: int, raw: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise MalformedRowError(row_index, f"{label} {value!r} is not a number", raw) from None
    if not math.isfinite(number):
        raise MalformedRowError(row_index, f"{label} {value!r} is not finite", raw)
    return number


def is_blank(row: Row) -> bool:
    """True for rows with no content, such as a trailing empty line."""
    return all(not value for value in row)


def parse_row(row: Row, row_index: int) -> ParsedRow:
    """Validate and coerce one row.

    Raises:
        MalformedRowError: Too few columns, or an unparseable year,
            longitude or latitude.
    """
    raw = "\t".join(row)
    if len(row) < MIN_COLUMNS:
        raise MalformedRowError(
            row_index, f"expected at least {MIN_COLUMNS} columns, got {len(row)}", raw
        )

    try:
        year = int(row[YEAR])
    except ValueError:
        raise MalformedRowError(row_index, f"year {row[YEAR]!r} is not an integer", raw) from None

    return ParsedRow(
        row_index=row_index,
        location=row[LOCATION],
        longitude=_parse_coordinate(row[LONGITUDE], "longitude", row_index, raw),
        latitude=_parse_coordinate(row[LATITUDE], "latitude", row_index, raw),
        year=year,
        name=row[NAME],
        note=_field(row, NOTE),
        kind=_field(row, TYPE),
    )


def format_title(location: str, name: str, year: int, note: str = "", kind: str = "") -> str:
    return f"{location} - {name} - {year} - {note} {kind}"


def _to_event(parsed: ParsedRow, year_range: YearRange, degenerate_weight: float) -> Event:
    return Event(
        latitude=parsed.latitude,
        longitude=parsed.longitude,
        year=parsed.year,
        identity=IdentityKey(name=parsed.name, year=parsed.year),
        title=format_title(parsed.location, parsed.name, parsed.year, parsed.note, parsed.kind),
        weight=normalized_weight(parsed.year, year_range, degenerate_weight),
    )


def mk_data(text: str, config: PipelineConfig | None = None) -> ParseResult:
    """Parse raw text into weighted events sorted by year.

    Blank lines are ignored, so empty input yields no events.

    Raises:
        PipelineError: A malformed row was found and the policy is
            ``"abort"``.  Carries every row error in the input.
        DegenerateYearRangeError: Every event shares one year and the
            policy is ``"abort"``.
    """
    if config is None:
        config = PipelineConfig()
    policy = config.parsing

    parsed_rows: list[ParsedRow] = []
    row_errors: list[RowError] = []
    for index, row in enumerate(parse(text, config.tokenizer)):
        if is_blank(row):
            continue
        try:
            parsed_rows.append(parse_row(row, index))
        except MalformedRowError as e:
            row_errors.append(e.row_error)

    if row_errors and policy.on_malformed_row == "abort":
        raise PipelineError(
            f"{len(row_errors)} malformed row(s); first: {row_errors[0]}", row_errors
        )
    for error in row_errors:
        logger.warning("row_skipped", row_index=error.row_index, reason=error.reason)

    year_range = compute_year_range(p.year for p in parsed_rows)
    if year_range is None:
        return ParseResult(row_errors=row_errors)

    if year_range.is_degenerate:
        if policy.on_degenerate_range == "abort":
            raise DegenerateYearRangeError(year_range.minimum)
        logger.warning(
            "degenerate_year_range",
            year=year_range.minimum,
            weight=policy.degenerate_weight,
            events=len(parsed_rows),
        )

    ordered = sorted(parsed_rows, key=lambda p: p.year)
    events = [_to_event(p, year_range, policy.degenerate_weight) for p in ordered]
    return ParseResult(
        events=events,
        row_errors=row_errors,
        year_range=year_range,
        degenerate_range=year_range.is_degenerate,
    )
