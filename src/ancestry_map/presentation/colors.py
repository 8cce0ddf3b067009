"""Weight to colour mapping along a linear RGB gradient."""

from __future__ import annotations

import math

from ancestry_map.config.pipeline import RGB, GradientConfig


def color_gradient(step: float, low: RGB, high: RGB) -> RGB:
    """Interpolate each channel: ``low + step * (high - low)``."""
    return tuple(lo + step * (hi - lo) for lo, hi in zip(low, high))  # type: ignore[return-value]


def mk_color(rgb: RGB) -> str:
    """Format channels as a CSS ``rgb(r,g,b)`` string, rounding each."""
    r, g, b = (int(round(channel)) for channel in rgb)
    return f"rgb({r},{g},{b})"


def color_for(weight: float, config: GradientConfig | None = None) -> str:
    """Colour for a marker or edge weight in ``[0, 1]``.

    Raises:
        ValueError: If ``weight`` is NaN or outside ``[0, 1]``.
    """
    if config is None:
        config = GradientConfig()
    if math.isnan(weight) or not 0.0 <= weight <= 1.0:
        raise ValueError(f"weight must lie in [0, 1], got {weight!r}")
    return mk_color(color_gradient(weight, config.low, config.high))
