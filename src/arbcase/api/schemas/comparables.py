from __future__ import annotations

from typing import List

from pydantic import BaseModel

from arbcase.models import SeasonStats


class ComparableResponse(BaseModel):
    player: str
    arb_year: int
    mls: float
    prev_salary: str
    predicted_salary: str
    status: str
    stats: SeasonStats | None = None


class HistoricalComparableRow(BaseModel):
    player: str
    club: str
    season: int
    status: str
    era: float
    wins: int
    strikeouts: int
    innings: float
    whip: float
    fip: float
    war: float
    all_star_appearances: int = 0
    salary: str
    highlight: bool = False


class ComparableSummaryResponse(BaseModel):
    reference_era: float
    reference_wins: int
    reference_strikeouts: int
    reference_innings: float
    reference_whip: float
    reference_fip: float
    reference_war: float
    reference_salary: float
    reference_all_star_appearances: int
    avg_era: float
    avg_wins: float
    avg_strikeouts: float
    avg_innings: float
    avg_whip: float
    avg_fip: float
    avg_war: float
    avg_salary: float
    avg_all_star_appearances: float
    comparables: int


class HistoricalComparablesResponse(BaseModel):
    reference: SeasonStats
    rows: List[HistoricalComparableRow]
    summary: ComparableSummaryResponse | None = None
