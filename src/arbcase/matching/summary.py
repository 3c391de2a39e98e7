"""Aggregate historical comparables into a valuation summary row."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from statistics import fmean
from typing import Optional, Sequence

from arbcase.config.all_stars import DEFAULT_ALL_STARS, AllStarRegistry
from arbcase.models import HistoricalArbitrationRecord, SeasonStats


_SALARY_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)([mk])?$")
_SALARY_MULTIPLIERS = {"m": 1_000_000.0, "k": 1_000.0}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (12.5 -> 13)."""

    return math.floor(value + 0.5)


def parse_salary(raw: Optional[str]) -> Optional[float]:
    """Parse display salaries such as ``"$4,250,000"`` or ``"$3.5M"``."""

    if raw is None:
        return None
    text = re.sub(r"[$,\s]", "", raw).lower()
    match = _SALARY_PATTERN.match(text)
    if match is None:
        return None
    value = float(match.group(1))
    suffix = match.group(2)
    if suffix:
        value *= _SALARY_MULTIPLIERS[suffix]
    return value


@dataclass(frozen=True)
class ComparableSummary:
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


def summarize_comparables(
    reference: SeasonStats,
    comparables: Sequence[HistoricalArbitrationRecord],
    *,
    reference_salary: Optional[str] = None,
    reference_all_star_appearances: int = 0,
    all_stars: AllStarRegistry = DEFAULT_ALL_STARS,
) -> Optional[ComparableSummary]:
    """Average the comparables next to the reference season.

    Wins and strikeouts are rounded per record before averaging, matching how
    the comparison table displays them. Only positive salaries count toward
    ``avg_salary``. All-Star counts come from ``all_stars`` by player name.
    """

    if not comparables:
        return None
    salaries = [
        value
        for value in (parse_salary(comp.salary) for comp in comparables)
        if value is not None and value > 0
    ]
    return ComparableSummary(
        reference_era=reference.era,
        reference_wins=round_half_up(reference.wins),
        reference_strikeouts=round_half_up(reference.strikeouts),
        reference_innings=reference.innings,
        reference_whip=reference.whip,
        reference_fip=reference.fip,
        reference_war=reference.war,
        reference_salary=parse_salary(reference_salary) or 0.0,
        reference_all_star_appearances=reference_all_star_appearances,
        avg_era=fmean(comp.era for comp in comparables),
        avg_wins=fmean(round_half_up(comp.wins) for comp in comparables),
        avg_strikeouts=fmean(round_half_up(comp.strikeouts) for comp in comparables),
        avg_innings=fmean(comp.innings for comp in comparables),
        avg_whip=fmean(comp.whip for comp in comparables),
        avg_fip=fmean(comp.fip for comp in comparables),
        avg_war=fmean(comp.war for comp in comparables),
        avg_salary=fmean(salaries) if salaries else 0.0,
        avg_all_star_appearances=fmean(all_stars.appearances(comp.player) for comp in comparables),
        comparables=len(comparables),
    )
