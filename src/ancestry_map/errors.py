"""Error types raised by the ancestry map pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RowError:
    """Diagnostic for a single input row that could not become an event.

    Attributes:
        row_index: Zero-based line number in the raw input.
        reason: Human-readable explanation.
        raw: The trimmed fields of the offending row, re-joined with tabs.
    """

    row_index: int
    reason: str
    raw: str = ""

    def __str__(self) -> str:
        return f"row {self.row_index}: {self.reason}"


class PipelineError(Exception):
    """A load could not complete; previously rendered data stays valid."""

    def __init__(self, message: str, row_errors: list[RowError] | None = None) -> None:
        super().__init__(message)
        self.row_errors = list(row_errors or [])


class MalformedRowError(PipelineError):
    """A row has too few columns or an unparseable numeric field."""

    def __init__(self, row_index: int, reason: str, raw: str = "") -> None:
        self.row_error = RowError(row_index=row_index, reason=reason, raw=raw)
        super().__init__(str(self.row_error), [self.row_error])

    @property
    def row_index(self) -> int:
        return self.row_error.row_index

    @property
    def reason(self) -> str:
        return self.row_error.reason


class DegenerateYearRangeError(PipelineError):
    """All events share one year, so weights cannot be normalised."""

    def __init__(self, year: int) -> None:
        super().__init__(f"all events share the year {year}; weight range is empty")
        self.year = year
