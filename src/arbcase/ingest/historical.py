"""Load the historical arbitration pool used for comparable matching."""

from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from arbcase.ingest.csv_text import (
    iter_rows,
    parse_flag,
    parse_float,
    parse_int,
    parse_optional_float,
)
from arbcase.ingest.sources import SourceUnavailableError, TableSource, fetch_text
from arbcase.models import HistoricalArbitrationRecord


logger = logging.getLogger(__name__)

DEFAULT_HISTORICAL_MAPPING: Dict[str, str] = {
    "is_pitcher": "is_pitcher",
    "arb_year": "Arb_Year",
    "player": "Player",
    "season": "Season",
    "club": "Club",
    "mls": "MLS",
    "salary": "Salary",
    "era": "p_ERA",
    "wins": "p_W",
    "strikeouts": "p_SO",
    "innings": "p_IP",
    "whip": "p_WHIP",
    "fip": "p_FIP",
    "war": "p_WAR",
}


def row_to_historical_record(
    row: Mapping[str, str],
    mapping: Mapping[str, str] | None = None,
) -> Optional[HistoricalArbitrationRecord]:
    """Build a record from ``row`` or return ``None`` when it is unusable.

    Only pitcher rows with numeric ERA, innings and strikeouts are usable.
    """

    columns = dict(DEFAULT_HISTORICAL_MAPPING)
    if mapping:
        columns.update(mapping)

    def raw(key: str) -> str:
        return row.get(columns[key], "")

    if parse_flag(raw("is_pitcher")) is not True:
        return None
    era = parse_optional_float(raw("era"))
    innings = parse_optional_float(raw("innings"))
    strikeouts = parse_optional_float(raw("strikeouts"))
    if era is None or innings is None or strikeouts is None:
        logger.debug("Skipping historical row for %r with missing rate stats", raw("player"))
        return None
    return HistoricalArbitrationRecord(
        arb_year=parse_int(raw("arb_year")),
        player=raw("player").replace('"', ""),
        season=parse_int(raw("season")),
        club=raw("club"),
        mls=parse_float(raw("mls")),
        salary=raw("salary").replace('"', ""),
        era=era,
        wins=parse_float(raw("wins")),
        strikeouts=strikeouts,
        innings=innings,
        whip=parse_float(raw("whip")),
        fip=parse_float(raw("fip")),
        war=parse_float(raw("war")),
    )


def parse_historical_records(
    text: str,
    *,
    mapping: Mapping[str, str] | None = None,
) -> List[HistoricalArbitrationRecord]:
    records: List[HistoricalArbitrationRecord] = []
    for row in iter_rows(text):
        record = row_to_historical_record(row, mapping)
        if record is not None:
            records.append(record)
    return records


async def load_historical_records(
    source: TableSource,
    *,
    mapping: Mapping[str, str] | None = None,
) -> List[HistoricalArbitrationRecord]:
    try:
        text = await fetch_text(source, fallback_encoding=True)
    except SourceUnavailableError as exc:
        logger.error("Unable to load historical arbitration data from %s: %s", exc.source, exc.reason)
        return []
    return parse_historical_records(text, mapping=mapping)


__all__ = [
    "DEFAULT_HISTORICAL_MAPPING",
    "load_historical_records",
    "parse_historical_records",
    "row_to_historical_record",
]
