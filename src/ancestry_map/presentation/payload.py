"""Render-ready view models handed to the map widget.

Positions are ``[longitude, latitude]`` pairs in the order the input
columns are labelled; the widget consumes them as its own coordinate
pair without swapping.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel

from ancestry_map.config.pipeline import PipelineConfig
from ancestry_map.models import Edge, Marker
from ancestry_map.presentation.colors import color_for
from ancestry_map.presentation.layout import center_point


class MarkerView(BaseModel):
    position: tuple[float, float]
    color: str
    weight: float
    radius: float
    opacity: float
    tooltip: list[str]


class EdgeView(BaseModel):
    positions: tuple[tuple[float, float], tuple[float, float]]
    color: str
    weight: float
    source_tooltip: list[str]
    target_tooltip: list[str]


class MapPayload(BaseModel):
    center: tuple[float, float] | None
    zoom: float
    markers: list[MarkerView] = []
    edges: list[EdgeView] = []


def marker_view(marker: Marker, config: PipelineConfig) -> MarkerView:
    return MarkerView(
        position=(marker.longitude, marker.latitude),
        color=color_for(marker.weight, config.gradient),
        weight=marker.weight,
        radius=config.map.marker_radius,
        opacity=config.map.marker_opacity,
        tooltip=marker.title_lines,
    )


def edge_view(edge: Edge, config: PipelineConfig) -> EdgeView:
    return EdgeView(
        positions=(
            (edge.source.longitude, edge.source.latitude),
            (edge.target.longitude, edge.target.latitude),
        ),
        color=color_for(edge.weight, config.gradient),
        weight=edge.weight,
        source_tooltip=edge.source.title_lines,
        target_tooltip=edge.target.title_lines,
    )


def build_map_payload(
    markers: Sequence[Marker],
    edges: Sequence[Edge],
    config: PipelineConfig | None = None,
) -> MapPayload:
    """Convert markers and edges into colour-mapped views plus map center."""
    if config is None:
        config = PipelineConfig()
    return MapPayload(
        center=center_point(markers),
        zoom=config.map.zoom,
        markers=[marker_view(m, config) for m in markers],
        edges=[edge_view(e, config) for e in edges],
    )
