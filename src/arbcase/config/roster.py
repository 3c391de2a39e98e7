"""Curated comparable-player rosters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Sequence, Tuple


@dataclass(frozen=True)
class RosterTarget:
    first_name: str
    last_name: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name.title()} {self.last_name.title()}"


@dataclass(frozen=True)
class ComparableRoster:
    """Ordered list of players hand-picked as market comparables."""

    key: str
    targets: Tuple[RosterTarget, ...]

    def __iter__(self) -> Iterator[RosterTarget]:
        return iter(self.targets)

    def __len__(self) -> int:
        return len(self.targets)

    @classmethod
    def from_pairs(cls, key: str, pairs: Iterable[Sequence[str]]) -> "ComparableRoster":
        targets = []
        for pair in pairs:
            if len(pair) != 2:
                raise ValueError(f"roster entry must be (first_name, last_name), got {pair!r}")
            first_name, last_name = pair
            targets.append(RosterTarget(first_name.strip().lower(), last_name.strip().lower()))
        return cls(key=key, targets=tuple(targets))


_ROSTERS: Dict[str, ComparableRoster] = {
    "2026_SP_ARB": ComparableRoster.from_pairs(
        "2026_SP_ARB",
        [
            ("george", "kirby"),
            ("logan", "gilbert"),
            ("hunter", "brown"),
            ("bailey", "ober"),
            ("trevor", "rogers"),
        ],
    ),
}

DEFAULT_ROSTER_KEY = "2026_SP_ARB"
DEFAULT_ROSTER = _ROSTERS[DEFAULT_ROSTER_KEY]


def iter_rosters() -> Iterable[ComparableRoster]:
    """Return an iterator of all configured rosters."""

    return _ROSTERS.values()


def get_roster(key: str) -> ComparableRoster:
    """Fetch a roster by key, raising KeyError if missing."""

    normalized = key.upper()
    if normalized not in _ROSTERS:
        raise KeyError(f"No comparable roster configured for key={key!r}")
    return _ROSTERS[normalized]
