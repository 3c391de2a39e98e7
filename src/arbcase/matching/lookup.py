"""Resolve a player's season line from the season statistics table."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from arbcase.ingest.csv_text import parse_line, split_table
from arbcase.ingest.season_stats import row_name, row_season, row_to_season_stats
from arbcase.ingest.sources import SourceUnavailableError, TableSource, fetch_text
from arbcase.models import SeasonStats


logger = logging.getLogger(__name__)

DEFAULT_SEASON = 2025


def split_player_name(player_name: str) -> Tuple[str, str]:
    """Return ``(surname_token, given_token)`` for matching.

    ``"Ryan, Joe"`` yields ``("ryan", "joe")``. Without a comma the whole
    lower-cased name is the surname token and the given token is empty.
    """

    parts = [part.strip() for part in player_name.lower().split(",")]
    surname = parts[0]
    given = parts[1] if len(parts) > 1 else ""
    return surname, given


def _matches_name(csv_name: str, surname: str, given: str) -> bool:
    lowered = csv_name.lower()
    return surname in lowered and (not given or given in lowered)


def resolve_player_season(
    text: str,
    player_name: str,
    season: Optional[int] = None,
    *,
    default_season: int = DEFAULT_SEASON,
) -> Optional[SeasonStats]:
    """Find ``player_name``'s stats for ``season`` in ``text``.

    An explicit ``season`` is exact-or-nothing. When ``season`` is omitted the
    ``default_season`` is tried first, then the player's latest season. Ties on
    the latest season keep the first row in table order.
    """

    headers, lines = split_table(text)
    if not headers:
        return None
    surname, given = split_player_name(player_name)
    target_season = season or default_season

    matching_rows = []
    for line in lines:
        row = parse_line(line, headers)
        if not _matches_name(row_name(row), surname, given):
            continue
        if row_season(row) == target_season:
            return row_to_season_stats(row, headers)
        matching_rows.append(row)

    if season:
        return None

    latest_row = None
    latest_season = 0
    for row in matching_rows:
        row_year = row_season(row)
        if row_year > latest_season:
            latest_season = row_year
            latest_row = row
    if latest_row is None:
        return None
    logger.debug(
        "No %d season for %r; falling back to %d", target_season, player_name, latest_season
    )
    return row_to_season_stats(latest_row, headers)


async def find_player_season(
    source: TableSource,
    player_name: str,
    season: Optional[int] = None,
    *,
    default_season: int = DEFAULT_SEASON,
) -> Optional[SeasonStats]:
    try:
        text = await fetch_text(source)
    except SourceUnavailableError as exc:
        logger.error("Unable to load player stats from %s: %s", exc.source, exc.reason)
        return None
    return resolve_player_season(text, player_name, season, default_season=default_season)


__all__ = [
    "DEFAULT_SEASON",
    "find_player_season",
    "resolve_player_season",
    "split_player_name",
]
