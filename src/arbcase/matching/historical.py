"""Rank historical arbitration cases by similarity to a reference season."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Sequence

from arbcase.ingest.historical import load_historical_records
from arbcase.ingest.sources import TableSource
from arbcase.models import HistoricalArbitrationRecord, SeasonStats


# Service-time band for second-year (Super Two) arbitration eligibility.
SECOND_ARB_MLS_MIN = 3.15
SECOND_ARB_MLS_MAX = 4.1

ERA_WEIGHT = 0.4
STRIKEOUT_WEIGHT = 0.3
INNINGS_WEIGHT = 0.2
WINS_WEIGHT = 0.1

WINS_FLOOR = 10.0

_NAME_SUFFIX_TOKENS = {"jr", "sr", "ii", "iii", "iv", "v"}


@dataclass(frozen=True)
class ScoredCandidate:
    score: float
    record: HistoricalArbitrationRecord


def name_tokens(name: str) -> FrozenSet[str]:
    """Order-insensitive name key, so ``"Ryan, Joe"`` equals ``"Joe Ryan"``."""

    cleaned = re.sub(r"[^\w]+", " ", name.lower())
    return frozenset(tok for tok in cleaned.split() if tok not in _NAME_SUFFIX_TOKENS)


def _relative_difference(candidate: float, reference: float, floor: float = 1.0) -> float:
    return abs(candidate - reference) / max(candidate, reference, floor)


def similarity_score(record: HistoricalArbitrationRecord, reference: SeasonStats) -> float:
    """Weighted normalized distance; lower means more similar."""

    era_term = _relative_difference(record.era, reference.era)
    strikeout_term = _relative_difference(record.strikeouts, reference.strikeouts)
    innings_term = _relative_difference(record.innings, reference.innings)
    wins_term = abs(record.wins - reference.wins) / max(
        max(record.wins, reference.wins, 1.0), WINS_FLOOR
    )
    return (
        ERA_WEIGHT * era_term
        + STRIKEOUT_WEIGHT * strikeout_term
        + INNINGS_WEIGHT * innings_term
        + WINS_WEIGHT * wins_term
    )


def eligible_candidates(
    records: Iterable[HistoricalArbitrationRecord],
    reference: SeasonStats,
) -> List[HistoricalArbitrationRecord]:
    reference_key = name_tokens(reference.name)
    return [
        record
        for record in records
        if SECOND_ARB_MLS_MIN <= record.mls < SECOND_ARB_MLS_MAX
        and name_tokens(record.player) != reference_key
    ]


def rank_historical_comparables(
    reference: SeasonStats,
    records: Sequence[HistoricalArbitrationRecord],
    limit: int,
) -> List[HistoricalArbitrationRecord]:
    scored = [
        ScoredCandidate(similarity_score(record, reference), record)
        for record in eligible_candidates(records, reference)
    ]
    scored.sort(key=lambda candidate: candidate.score)
    return [candidate.record for candidate in scored[: max(0, limit)]]


async def find_historical_comparables(
    source: TableSource,
    reference: SeasonStats,
    limit: int = 6,
) -> List[HistoricalArbitrationRecord]:
    records = await load_historical_records(source)
    return rank_historical_comparables(reference, records, limit)


__all__ = [
    "eligible_candidates",
    "find_historical_comparables",
    "name_tokens",
    "rank_historical_comparables",
    "similarity_score",
]
