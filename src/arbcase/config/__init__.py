"""Configuration helpers for comparable rosters and all-star counts."""

from .all_stars import DEFAULT_ALL_STARS, DEFAULT_REFERENCE_ALL_STARS, AllStarRegistry
from .roster import (
    DEFAULT_ROSTER,
    ComparableRoster,
    RosterTarget,
    get_roster,
    iter_rosters,
)

__all__ = [
    "DEFAULT_ALL_STARS",
    "DEFAULT_REFERENCE_ALL_STARS",
    "DEFAULT_ROSTER",
    "AllStarRegistry",
    "ComparableRoster",
    "RosterTarget",
    "get_roster",
    "iter_rosters",
]
