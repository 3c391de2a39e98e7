"""Helpers to load arbitration salary predictions."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from arbcase.ingest.csv_text import iter_rows, parse_float, parse_int
from arbcase.ingest.sources import SourceUnavailableError, TableSource, fetch_text
from arbcase.models import ArbitrationPrediction


logger = logging.getLogger(__name__)

PLAYER_COLUMN = "Player"
ARB_YEAR_COLUMN = "Arb_Year"
MLS_COLUMN = "MLS"
PREV_SALARY_COLUMN = "Prev_Salary"
PREDICTED_SALARY_COLUMN = "Predicted_Salary_2026"


def _unquote(value: str) -> str:
    return value.replace('"', "")


def parse_predictions(text: str) -> List[ArbitrationPrediction]:
    return [
        ArbitrationPrediction(
            player=_unquote(row.get(PLAYER_COLUMN, "")),
            arb_year=parse_int(row.get(ARB_YEAR_COLUMN)),
            mls=parse_float(row.get(MLS_COLUMN)),
            prev_salary=_unquote(row.get(PREV_SALARY_COLUMN, "")),
            predicted_salary=_unquote(row.get(PREDICTED_SALARY_COLUMN, "")),
        )
        for row in iter_rows(text)
    ]


async def load_predictions(source: TableSource) -> List[ArbitrationPrediction]:
    try:
        text = await fetch_text(source)
    except SourceUnavailableError as exc:
        logger.error("Unable to load arbitration predictions from %s: %s", exc.source, exc.reason)
        return []
    return parse_predictions(text)


def name_contains_all(name: str, fragments: Iterable[str]) -> bool:
    lowered = name.lower()
    return all(fragment.strip().lower() in lowered for fragment in fragments)


def find_prediction(
    predictions: Iterable[ArbitrationPrediction],
    first_name: str,
    last_name: str,
) -> Optional[ArbitrationPrediction]:
    """Return the first prediction whose player contains both name fragments."""

    for prediction in predictions:
        if name_contains_all(prediction.player, (first_name, last_name)):
            return prediction
    return None


async def load_prediction(
    source: TableSource,
    first_name: str,
    last_name: str,
) -> Optional[ArbitrationPrediction]:
    return find_prediction(await load_predictions(source), first_name, last_name)


__all__ = [
    "find_prediction",
    "load_prediction",
    "load_predictions",
    "name_contains_all",
    "parse_predictions",
]
