"""Year range computation and weight normalisation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class YearRange:
    """Inclusive span of years found in one dataset."""

    minimum: int
    maximum: int

    @property
    def span(self) -> int:
        return self.maximum - self.minimum

    @property
    def is_degenerate(self) -> bool:
        """True when every event shares one year."""
        return self.span == 0


def compute_year_range(years: Iterable[int]) -> YearRange | None:
    """Return the min/max of ``years``, or ``None`` if there are none."""
    values = list(years)
    if not values:
        return None
    return YearRange(minimum=min(values), maximum=max(values))


def normalized_weight(
    year: int, year_range: YearRange, degenerate_weight: float = 0.0
) -> float:
    """Map ``year`` linearly onto ``[0, 1]`` over ``year_range``.

    The oldest year maps to 0.0 and the newest to 1.0.  A degenerate
    range returns ``degenerate_weight`` instead of dividing by zero.
    """
    if year_range.is_degenerate:
        return degenerate_weight
    return (year - year_range.minimum) / year_range.span
