"""Boundary between the pipeline and the map rendering widget."""

from ancestry_map.presentation.colors import color_for, color_gradient, mk_color
from ancestry_map.presentation.layout import center_point
from ancestry_map.presentation.payload import EdgeView, MapPayload, MarkerView, build_map_payload

__all__ = [
    "build_map_payload",
    "center_point",
    "color_for",
    "color_gradient",
    "EdgeView",
    "MapPayload",
    "MarkerView",
    "mk_color",
]
