"""Input adapters that turn raw stat tables into typed records."""

from .csv_text import parse_fields, parse_line, split_table
from .historical import load_historical_records, parse_historical_records
from .predictions import (
    find_prediction,
    load_prediction,
    load_predictions,
    parse_predictions,
)
from .season_stats import latest_season_stats, load_season_stats, parse_season_stats
from .sources import (
    FileTableSource,
    HttpTableSource,
    SourceUnavailableError,
    TableSource,
    TextTableSource,
    decode_with_fallback,
)

__all__ = [
    "FileTableSource",
    "HttpTableSource",
    "SourceUnavailableError",
    "TableSource",
    "TextTableSource",
    "decode_with_fallback",
    "find_prediction",
    "latest_season_stats",
    "load_historical_records",
    "load_prediction",
    "load_predictions",
    "load_season_stats",
    "parse_fields",
    "parse_historical_records",
    "parse_line",
    "parse_predictions",
    "parse_season_stats",
    "split_table",
]
