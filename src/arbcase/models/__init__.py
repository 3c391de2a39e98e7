"""Immutable record types produced by the loaders."""

from .records import (
    ArbitrationPrediction,
    ComparablePlayer,
    HistoricalArbitrationRecord,
    SeasonStats,
)

__all__ = [
    "ArbitrationPrediction",
    "ComparablePlayer",
    "HistoricalArbitrationRecord",
    "SeasonStats",
]
