"""Canonical pitcher records shared across ingestion and matching layers."""

from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class SeasonStats(BaseModel):
    """One player-season of pitching statistics."""

    season: int = 0
    name: str
    age: float = 0.0
    wins: float = 0.0
    losses: float = 0.0
    war: float = 0.0
    era: float = 0.0
    games: float = 0.0
    games_started: float = 0.0
    innings: float = 0.0
    strikeouts: float = 0.0
    walks: float = 0.0
    hits: float = 0.0
    runs: float = 0.0
    earned_runs: float = 0.0
    home_runs: float = 0.0
    whip: float = 0.0
    fip: float = 0.0
    strikeouts_per_9: float = 0.0
    walks_per_9: float = 0.0
    home_runs_per_9: float = 0.0
    extra: Dict[str, str] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class ArbitrationPrediction(BaseModel):
    """Modeled arbitration salary for one player."""

    player: str
    arb_year: int = 0
    mls: float = 0.0
    prev_salary: str = ""
    predicted_salary: str = ""

    model_config = ConfigDict(frozen=True)


class HistoricalArbitrationRecord(BaseModel):
    """Past arbitration-eligible pitcher season used as a comparison pool entry."""

    arb_year: int = 0
    player: str
    season: int = 0
    club: str = ""
    mls: float = 0.0
    salary: str = ""
    era: float
    wins: float = 0.0
    strikeouts: float
    innings: float
    whip: float = 0.0
    fip: float = 0.0
    war: float = 0.0

    model_config = ConfigDict(frozen=True)


class ComparablePlayer(ArbitrationPrediction):
    """Curated comparable with the season stats resolved for it, if any."""

    stats: Optional[SeasonStats] = None
