"""Select curated market comparables from the prediction table."""

from __future__ import annotations

import logging
from typing import List, Sequence

from arbcase.config.roster import ComparableRoster
from arbcase.ingest.predictions import find_prediction, load_predictions
from arbcase.ingest.sources import SourceUnavailableError, TableSource, fetch_text
from arbcase.matching.lookup import DEFAULT_SEASON, resolve_player_season
from arbcase.models import ArbitrationPrediction, ComparablePlayer


logger = logging.getLogger(__name__)


def select_comparables(
    predictions: Sequence[ArbitrationPrediction],
    roster: ComparableRoster,
    limit: int,
) -> List[ArbitrationPrediction]:
    """Return up to ``limit`` predictions in roster order, skipping misses."""

    comparables: List[ArbitrationPrediction] = []
    for target in roster:
        found = find_prediction(predictions, target.first_name, target.last_name)
        if found is None:
            logger.debug("No prediction row for comparable %s", target.display_name)
            continue
        comparables.append(found)
    return comparables[: max(0, limit)]


async def load_comparables(
    source: TableSource,
    roster: ComparableRoster,
    limit: int = 5,
) -> List[ArbitrationPrediction]:
    return select_comparables(await load_predictions(source), roster, limit)


async def load_comparables_with_stats(
    predictions_source: TableSource,
    stats_source: TableSource,
    roster: ComparableRoster,
    limit: int = 5,
    *,
    season: int = DEFAULT_SEASON,
) -> List[ComparablePlayer]:
    """Attach each comparable's ``season`` stats; misses keep ``stats=None``."""

    comparables = await load_comparables(predictions_source, roster, limit)
    if not comparables:
        return []
    try:
        stats_text = await fetch_text(stats_source)
    except SourceUnavailableError as exc:
        logger.error("Unable to load comparable stats from %s: %s", exc.source, exc.reason)
        stats_text = ""

    players: List[ComparablePlayer] = []
    for comp in comparables:
        stats = resolve_player_season(stats_text, comp.player, season) if stats_text else None
        players.append(ComparablePlayer(**comp.model_dump(), stats=stats))
    return players


__all__ = [
    "load_comparables",
    "load_comparables_with_stats",
    "select_comparables",
]
