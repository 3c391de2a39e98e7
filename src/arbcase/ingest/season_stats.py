"""Load per-season pitching statistics for a named player."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from arbcase.ingest.csv_text import (
    first_value,
    parse_float,
    parse_int,
    parse_line,
    split_table,
)
from arbcase.ingest.sources import SourceUnavailableError, TableSource, fetch_text
from arbcase.models import SeasonStats


logger = logging.getLogger(__name__)

NameTarget = Union[str, Callable[[str], bool]]

NAME_COLUMNS: Tuple[str, ...] = ("Name", "name")
SEASON_COLUMNS: Tuple[str, ...] = ("Season", "season")

# FanGraphs-prefixed column first, plain column as fallback.
DEFAULT_STATS_MAPPING: Dict[str, Tuple[str, ...]] = {
    "age": ("fg_Age", "Age"),
    "wins": ("fg_W", "W"),
    "losses": ("fg_L", "L"),
    "war": ("fg_WAR", "WAR"),
    "era": ("fg_ERA", "ERA"),
    "games": ("fg_G", "G"),
    "games_started": ("fg_GS", "GS"),
    "innings": ("fg_IP", "IP"),
    "strikeouts": ("fg_SO", "SO"),
    "walks": ("fg_BB", "BB"),
    "hits": ("fg_H", "H"),
    "runs": ("fg_R", "R"),
    "earned_runs": ("fg_ER", "ER"),
    "home_runs": ("fg_HR", "HR"),
    "whip": ("fg_WHIP", "WHIP"),
    "fip": ("fg_FIP", "FIP"),
    "strikeouts_per_9": ("fg_K/9", "K/9"),
    "walks_per_9": ("fg_BB/9", "BB/9"),
    "home_runs_per_9": ("fg_HR/9", "HR/9"),
}


def row_name(row: Mapping[str, str]) -> str:
    return first_value(row, NAME_COLUMNS)


def row_season(row: Mapping[str, str]) -> int:
    return parse_int(first_value(row, SEASON_COLUMNS))


def name_matcher(target: NameTarget) -> Callable[[str], bool]:
    """Turn ``target`` into a predicate over raw name values.

    Strings match by case-insensitive substring containment.
    """

    if callable(target):
        return target
    needle = target.strip().lower()
    return lambda name: needle in name.lower()


def row_to_season_stats(
    row: Mapping[str, str],
    headers: Sequence[str],
    *,
    mapping: Mapping[str, Sequence[str]] | None = None,
) -> SeasonStats:
    mapping = mapping or DEFAULT_STATS_MAPPING
    consumed = set(NAME_COLUMNS) | set(SEASON_COLUMNS)
    data: Dict[str, object] = {
        "season": row_season(row),
        "name": row_name(row),
    }
    for field_name, columns in mapping.items():
        consumed.update(columns)
        data[field_name] = parse_float(first_value(row, columns))
    data["extra"] = {
        header: row.get(header, "")
        for header in headers
        if header and header not in consumed
    }
    return SeasonStats(**data)


def parse_season_stats(
    text: str,
    target: NameTarget,
    *,
    mapping: Mapping[str, Sequence[str]] | None = None,
) -> List[SeasonStats]:
    """Return every season for ``target`` found in ``text``, most recent first."""

    headers, lines = split_table(text)
    matches = name_matcher(target)
    stats: List[SeasonStats] = []
    for line in lines:
        row = parse_line(line, headers)
        if not matches(row_name(row)):
            continue
        stats.append(row_to_season_stats(row, headers, mapping=mapping))
    stats.sort(key=lambda record: record.season, reverse=True)
    return stats


async def load_season_stats(
    source: TableSource,
    target: NameTarget,
    *,
    mapping: Mapping[str, Sequence[str]] | None = None,
) -> List[SeasonStats]:
    try:
        text = await fetch_text(source)
    except SourceUnavailableError as exc:
        logger.error("Unable to load season stats from %s: %s", exc.source, exc.reason)
        return []
    return parse_season_stats(text, target, mapping=mapping)


async def latest_season_stats(source: TableSource, target: NameTarget) -> Optional[SeasonStats]:
    stats = await load_season_stats(source, target)
    return stats[0] if stats else None


__all__ = [
    "DEFAULT_STATS_MAPPING",
    "NameTarget",
    "latest_season_stats",
    "load_season_stats",
    "name_matcher",
    "parse_season_stats",
    "row_name",
    "row_season",
    "row_to_season_stats",
]
