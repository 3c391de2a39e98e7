"""Pydantic models for API I/O."""

from .comparables import (
    ComparableResponse,
    ComparableSummaryResponse,
    HistoricalComparableRow,
    HistoricalComparablesResponse,
)

__all__ = [
    "ComparableResponse",
    "ComparableSummaryResponse",
    "HistoricalComparableRow",
    "HistoricalComparablesResponse",
]
