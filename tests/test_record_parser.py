"""Tests for the record parser and year normalisation."""

import math

import pytest

from ancestry_map.config.pipeline import ParsingConfig, PipelineConfig
from ancestry_map.errors import DegenerateYearRangeError, MalformedRowError, PipelineError
from ancestry_map.ingestion import mk_data, parse_row
from ancestry_map.ingestion.record_parser import format_title
from ancestry_map.models import IdentityKey
from ancestry_map.preprocessing.normalizer import YearRange, compute_year_range, normalized_weight

from conftest import row


# ---------------------------------------------------------------------------
# parse_row
# ---------------------------------------------------------------------------

class TestParseRow:
    """Tests for validating a single tokenized row."""

    def test_columns_mapped_by_position(self):
        parsed = parse_row(["Praha", "50.1", "14.4", "1900", "Josef", "birth", "B"], 0)
        assert parsed.location == "Praha"
        assert parsed.longitude == 50.1
        assert parsed.latitude == 14.4
        assert parsed.year == 1900
        assert parsed.name == "Josef"
        assert parsed.note == "birth"
        assert parsed.kind == "B"

    def test_optional_columns_default_empty(self):
        parsed = parse_row(["Praha", "50.1", "14.4", "1900", "Josef"], 0)
        assert parsed.note == ""
        assert parsed.kind == ""

    def test_too_few_columns(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(["Praha", "50.1", "14.4", "1900"], 7)
        assert exc_info.value.row_index == 7
        assert "columns" in exc_info.value.reason

    def test_unparseable_year(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(["Praha", "50.1", "14.4", "19th c.", "Josef"], 2)
        assert "year" in exc_info.value.reason

    def test_unparseable_coordinate(self):
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(["Praha", "north", "14.4", "1900", "Josef"], 0)
        assert "longitude" in exc_info.value.reason

    def test_non_finite_coordinate(self):
        """NaN parses as a float but is not a position."""
        with pytest.raises(MalformedRowError) as exc_info:
            parse_row(["Praha", "50.1", "nan", "1900", "Josef"], 0)
        assert "latitude" in exc_info.value.reason


def test_format_title_with_and_without_optional_fields():
    assert format_title("P1", "Alice", 1900, "birth", "B") == "P1 - Alice - 1900 - birth B"
    assert format_title("P1", "Alice", 1900) == "P1 - Alice - 1900 -  "


# ---------------------------------------------------------------------------
# Normaliser
# ---------------------------------------------------------------------------

class TestNormalizer:
    """Tests for year range and weight computation."""

    def test_no_years(self):
        assert compute_year_range([]) is None

    def test_range(self):
        year_range = compute_year_range([1950, 1900, 2000])
        assert year_range == YearRange(minimum=1900, maximum=2000)
        assert year_range.span == 100
        assert not year_range.is_degenerate

    def test_weight_is_linear(self):
        year_range = YearRange(minimum=1900, maximum=2000)
        assert normalized_weight(1900, year_range) == 0.0
        assert normalized_weight(1925, year_range) == 0.25
        assert normalized_weight(2000, year_range) == 1.0

    def test_degenerate_range_uses_fallback(self):
        year_range = YearRange(minimum=1900, maximum=1900)
        assert year_range.is_degenerate
        assert normalized_weight(1900, year_range) == 0.0
        assert normalized_weight(1900, year_range, degenerate_weight=1.0) == 1.0


# ---------------------------------------------------------------------------
# mk_data
# ---------------------------------------------------------------------------

class TestMkData:
    """Tests for parsing raw text into weighted, sorted events."""

    def test_same_place_different_years(self):
        text = row("P1", "1.0", "2.0", "1900", "Alice") + "\n" + row("P1", "1.0", "2.0", "1950", "Alice") + "\n"
        result = mk_data(text)

        assert [e.year for e in result.events] == [1900, 1950]
        assert [e.weight for e in result.events] == [0.0, 1.0]
        assert result.events[0].identity == IdentityKey("Alice", 1900)
        assert str(result.events[1].identity) == "Alice - 1950"
        assert result.events[0].longitude == 1.0
        assert result.events[0].latitude == 2.0
        assert result.row_errors == []

    def test_sorted_ascending_and_stable(self):
        """Events come out by year; ties keep input order."""
        text = "\n".join(
            [
                row("C", "0", "0", "2000", "Carl"),
                row("A", "0", "0", "1900", "Ann"),
                row("B", "0", "0", "2000", "Bea"),
                row("D", "0", "0", "1950", "Dan"),
            ]
        )
        result = mk_data(text)
        assert [e.identity.name for e in result.events] == ["Ann", "Dan", "Carl", "Bea"]

    def test_weights_within_unit_interval(self, sample_text):
        result = mk_data(sample_text)
        assert len(result.events) == 9
        assert all(0.0 <= e.weight <= 1.0 for e in result.events)
        assert result.events[0].weight == 0.0
        assert result.events[-1].weight == 1.0

    def test_title_format(self):
        result = mk_data(row("Praha", "50.1", "14.4", "1900", "Josef", "birth", "B"))
        assert result.events[0].title == "Praha - Josef - 1900 - birth B"

    def test_comma_separated_coordinates(self):
        """Coordinates written as ``lon,lat`` in one tab field still parse."""
        result = mk_data("Praha\t50.1,14.4\t1900\tJosef")
        assert result.events[0].longitude == 50.1
        assert result.events[0].latitude == 14.4

    def test_empty_input_yields_no_events(self):
        result = mk_data("")
        assert result.events == []
        assert result.row_errors == []
        assert result.year_range is None

    def test_blank_lines_ignored(self):
        text = "\n" + row("P1", "1", "2", "1900", "Alice") + "\n\n   \n"
        result = mk_data(text)
        assert len(result.events) == 1
        assert result.row_errors == []

    def test_malformed_row_skipped_by_default(self, malformed_text):
        result = mk_data(malformed_text)

        assert [e.identity.name for e in result.events] == ["Alice", "Carol"]
        assert len(result.row_errors) == 1
        assert result.row_errors[0].row_index == 1
        assert "circa 1910" in result.row_errors[0].raw
        # Skipped rows never widen the year range
        assert result.year_range == YearRange(1900, 1950)

    def test_malformed_row_aborts(self, malformed_text, abort_config):
        with pytest.raises(PipelineError) as exc_info:
            mk_data(malformed_text, abort_config)
        assert [e.row_index for e in exc_info.value.row_errors] == [1]

    def test_abort_reports_every_bad_row(self, abort_config):
        text = "\n".join(["only\tthree\tcols", row("P", "x", "2", "1900", "A"), row("P", "1", "2", "1900", "A")])
        with pytest.raises(PipelineError) as exc_info:
            mk_data(text, abort_config)
        assert [e.row_index for e in exc_info.value.row_errors] == [0, 1]

    def test_degenerate_range_reported(self):
        text = row("P1", "1", "2", "1900", "Bob") + "\n" + row("P2", "3", "4", "1900", "Bob")
        result = mk_data(text)

        assert result.degenerate_range
        assert [e.weight for e in result.events] == [0.0, 0.0]
        assert not any(math.isnan(e.weight) for e in result.events)

    def test_degenerate_range_aborts(self):
        config = PipelineConfig(parsing=ParsingConfig(on_degenerate_range="abort"))
        with pytest.raises(DegenerateYearRangeError) as exc_info:
            mk_data(row("P1", "1", "2", "1900", "Bob"), config)
        assert exc_info.value.year == 1900
