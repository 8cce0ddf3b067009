"""Pipeline configuration with sensible defaults.

All parameters can be overridden via ``config/pipeline.yaml``.
If the file does not exist, defaults are used.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import structlog
import yaml
from pydantic import BaseModel, field_validator, model_validator

RGB = tuple[float, float, float]


class TokenizerConfig(BaseModel):
    """Delimiters used to split raw text into rows and fields."""

    line_separator: str = "\n"
    field_separators: list[str] = ["\t", ","]

    @field_validator("line_separator")
    @classmethod
    def line_separator_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("line_separator must not be empty")
        return value

    @field_validator("field_separators")
    @classmethod
    def separators_not_empty(cls, value: list[str]) -> list[str]:
        if any(not sep for sep in value):
            raise ValueError("field separators must not be empty strings")
        return value


class ParsingConfig(BaseModel):
    """How malformed rows and degenerate year ranges are handled."""

    on_malformed_row: Literal["skip", "abort"] = "skip"
    on_degenerate_range: Literal["zero", "abort"] = "zero"
    degenerate_weight: float = 0.0

    @field_validator("degenerate_weight")
    @classmethod
    def weight_in_unit_interval(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("degenerate_weight must lie in [0, 1]")
        return value


class ClusteringConfig(BaseModel):
    """Coordinate grouping.  ``None`` means exact float equality."""

    snap_decimals: int | None = None


class MatchingConfig(BaseModel):
    """Candidate pair generation for edge building."""

    pair_strategy: Literal["triangular", "keyed"] = "triangular"


class GradientConfig(BaseModel):
    """Colour endpoints for weight 0 (oldest) and weight 1 (newest)."""

    low: RGB = (255.0, 0.0, 0.0)
    high: RGB = (0.0, 0.0, 0.0)


class MapConfig(BaseModel):
    """Parameters handed to the map rendering widget."""

    zoom: float = 12.0
    marker_radius: float = 200.0
    marker_opacity: float = 1.0
    edge_weight: float = 3.0
    tiles: str = "OpenStreetMap"
    height: str = "650px"


class PipelineConfig(BaseModel):
    """Top-level pipeline configuration combining all sub-configs."""

    tokenizer: TokenizerConfig = TokenizerConfig()
    parsing: ParsingConfig = ParsingConfig()
    clustering: ClusteringConfig = ClusteringConfig()
    matching: MatchingConfig = MatchingConfig()
    gradient: GradientConfig = GradientConfig()
    map: MapConfig = MapConfig()

    @model_validator(mode="after")
    def warn_if_gradient_flat(self) -> "PipelineConfig":
        """Log a warning if both gradient endpoints are the same colour."""
        if self.gradient.low == self.gradient.high:
            structlog.get_logger().warning(
                "gradient_endpoints_equal",
                color=list(self.gradient.low),
            )
        return self


def load_pipeline_config(path: Path) -> PipelineConfig:
    """Load pipeline configuration from a YAML file.

    If the file does not exist, returns a ``PipelineConfig`` with all
    default values.  Partial overrides are supported -- only the keys
    present in the YAML file will override defaults.
    """
    if not path.exists():
        return PipelineConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return PipelineConfig(**data)
