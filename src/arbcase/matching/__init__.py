"""Player resolution, comparable selection and similarity ranking."""

from .comparables import load_comparables, load_comparables_with_stats, select_comparables
from .historical import (
    find_historical_comparables,
    rank_historical_comparables,
    similarity_score,
)
from .lookup import DEFAULT_SEASON, find_player_season, resolve_player_season
from .summary import ComparableSummary, parse_salary, round_half_up, summarize_comparables
from .tiers import ArbitrationTier, arbitration_tier

__all__ = [
    "ArbitrationTier",
    "ComparableSummary",
    "DEFAULT_SEASON",
    "arbitration_tier",
    "find_historical_comparables",
    "find_player_season",
    "load_comparables",
    "load_comparables_with_stats",
    "parse_salary",
    "rank_historical_comparables",
    "resolve_player_season",
    "round_half_up",
    "select_comparables",
    "similarity_score",
    "summarize_comparables",
]
