"""Shared test fixtures."""

from pathlib import Path

import pytest

from ancestry_map.config.pipeline import ParsingConfig, PipelineConfig

REPO_ROOT = Path(__file__).resolve().parents[1]
SAMPLE_DATA = REPO_ROOT / "src" / "ancestry_map" / "config" / "sample_data.tsv"
PIPELINE_YAML = REPO_ROOT / "config" / "pipeline.yaml"


def row(location: str, lon: str, lat: str, year: str, name: str, *extra: str) -> str:
    """Build one tab-delimited input line."""
    return "\t".join([location, lon, lat, year, name, *extra])


@pytest.fixture
def sample_text() -> str:
    """Return the bundled sample dataset."""
    return SAMPLE_DATA.read_text(encoding="utf-8")


@pytest.fixture
def abort_config() -> PipelineConfig:
    """A config that rejects the whole load on any malformed row."""
    return PipelineConfig(parsing=ParsingConfig(on_malformed_row="abort"))


@pytest.fixture
def malformed_text() -> str:
    """Two good rows around one with an unparseable year."""
    return "\n".join(
        [
            row("P1", "1.0", "2.0", "1900", "Alice"),
            row("P2", "3.0", "4.0", "circa 1910", "Bob"),
            row("P3", "5.0", "6.0", "1950", "Carol"),
        ]
    )
