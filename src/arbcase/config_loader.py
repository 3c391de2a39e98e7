"""Resolve data sources and rosters from the environment or JSON profiles."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from arbcase.config.all_stars import DEFAULT_ALL_STARS, DEFAULT_REFERENCE_ALL_STARS, AllStarRegistry
from arbcase.config.roster import DEFAULT_ROSTER, ComparableRoster
from arbcase.ingest.sources import FileTableSource, HttpTableSource, TableSource
from arbcase.matching.lookup import DEFAULT_SEASON


logger = logging.getLogger(__name__)

_DATA_DIR_ENV = "ARBCASE_DATA_DIR"
_DATA_URL_ENV = "ARBCASE_DATA_URL"
_REFERENCE_SEASON_ENV = "ARBCASE_REFERENCE_SEASON"
_ROSTER_PATH_ENV = "ARBCASE_ROSTER_PATH"

STATS_FILENAME = "fangraphs_pitchers.csv"
PREDICTIONS_FILENAME = "sorted_predictions.csv"
HISTORICAL_FILENAME = "historical_arbitration.csv"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default


@dataclass
class RosterProfile:
    key: str
    players: list[tuple[str, str]]

    @classmethod
    def load(cls, path: Path) -> "RosterProfile":
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid roster JSON in {path}: {exc}") from exc
        if not isinstance(data, dict) or "players" not in data:
            raise ValueError(f"Roster profile {path} must contain a 'players' list")
        players = []
        for entry in data["players"]:
            if not isinstance(entry, dict) or "first_name" not in entry or "last_name" not in entry:
                raise ValueError(f"Roster entry {entry!r} needs first_name and last_name")
            players.append((str(entry["first_name"]), str(entry["last_name"])))
        return cls(key=str(data.get("key", path.stem)), players=players)

    @classmethod
    def from_roster(cls, roster: ComparableRoster) -> "RosterProfile":
        return cls(
            key=roster.key,
            players=[(target.first_name, target.last_name) for target in roster],
        )

    def save(self, path: Path) -> None:
        payload = {
            "key": self.key,
            "players": [
                {"first_name": first_name, "last_name": last_name}
                for first_name, last_name in self.players
            ],
        }
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    def to_roster(self) -> ComparableRoster:
        return ComparableRoster.from_pairs(self.key, self.players)


@dataclass
class DataConfig:
    """Where the three tables live and who the valuation is about."""

    stats_location: str = STATS_FILENAME
    predictions_location: str = PREDICTIONS_FILENAME
    historical_location: str = HISTORICAL_FILENAME
    base_url: Optional[str] = None
    reference_season: int = DEFAULT_SEASON
    reference_first_name: str = "joe"
    reference_last_name: str = "ryan"
    roster: ComparableRoster = field(default=DEFAULT_ROSTER)
    reference_all_star_appearances: int = DEFAULT_REFERENCE_ALL_STARS
    all_stars: AllStarRegistry = field(default=DEFAULT_ALL_STARS)

    @property
    def reference_name(self) -> str:
        return f"{self.reference_first_name} {self.reference_last_name}"

    @classmethod
    def from_env(cls) -> "DataConfig":
        data_dir = Path(os.getenv(_DATA_DIR_ENV, "data"))
        base_url = os.getenv(_DATA_URL_ENV) or None
        roster = DEFAULT_ROSTER
        roster_path = os.getenv(_ROSTER_PATH_ENV)
        if roster_path:
            roster = RosterProfile.load(Path(roster_path)).to_roster()
        if base_url:
            locations = (STATS_FILENAME, PREDICTIONS_FILENAME, HISTORICAL_FILENAME)
        else:
            locations = tuple(
                str(data_dir / name)
                for name in (STATS_FILENAME, PREDICTIONS_FILENAME, HISTORICAL_FILENAME)
            )
        return cls(
            stats_location=locations[0],
            predictions_location=locations[1],
            historical_location=locations[2],
            base_url=base_url,
            reference_season=_env_int(_REFERENCE_SEASON_ENV, DEFAULT_SEASON),
            roster=roster,
        )

    def _source(self, location: str) -> TableSource:
        if self.base_url:
            return HttpTableSource(f"{self.base_url.rstrip('/')}/{location.lstrip('/')}")
        return FileTableSource(location)

    def sources(self) -> Dict[str, TableSource]:
        return {
            "stats": self._source(self.stats_location),
            "predictions": self._source(self.predictions_location),
            "historical": self._source(self.historical_location),
        }
