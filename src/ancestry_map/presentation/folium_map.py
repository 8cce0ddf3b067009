"""Leaflet map rendering via folium.

Draws one circle per marker and one polyline per edge, each with a hover
tooltip listing the merged titles.
"""

from __future__ import annotations

import html
from pathlib import Path

import folium
import structlog

from ancestry_map.config.pipeline import MapConfig
from ancestry_map.presentation.payload import MapPayload

logger = structlog.get_logger()


def _title_html(lines: list[str]) -> str:
    return "<div>" + "".join(f"<p>{html.escape(line)}</p>" for line in lines) + "</div>"


def render_map(payload: MapPayload, config: MapConfig | None = None) -> folium.Map:
    """Build a folium map centred on ``payload.center``."""
    if config is None:
        config = MapConfig()

    m = folium.Map(
        location=list(payload.center) if payload.center else None,
        zoom_start=payload.zoom,
        tiles=config.tiles,
        height=config.height,
    )

    for marker in payload.markers:
        folium.Circle(
            location=list(marker.position),
            radius=marker.radius,
            color=marker.color,
            opacity=marker.opacity,
            fill=True,
            fill_color=marker.color,
            tooltip=folium.Tooltip(_title_html(marker.tooltip)),
        ).add_to(m)

    for edge in payload.edges:
        folium.PolyLine(
            locations=[list(edge.positions[0]), list(edge.positions[1])],
            color=edge.color,
            weight=config.edge_weight,
            tooltip=folium.Tooltip(
                "<div>" + _title_html(edge.source_tooltip) + _title_html(edge.target_tooltip) + "</div>"
            ),
        ).add_to(m)

    return m


def save_map(payload: MapPayload, path: Path, config: MapConfig | None = None) -> Path:
    """Render ``payload`` and write a standalone HTML file to ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    render_map(payload, config).save(str(path))
    logger.info(
        "map_written",
        path=str(path),
        markers=len(payload.markers),
        edges=len(payload.edges),
    )
    return path
