"""All-Star appearance counts for historical comparables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class AllStarRegistry:
    """Ordered ``(name fragment, appearances)`` pairs.

    Lookups lowercase the player name and return the count of the first
    fragment it contains, so full names should precede bare surnames.
    """

    entries: Tuple[Tuple[str, int], ...]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, int]]) -> "AllStarRegistry":
        entries = []
        for fragment, appearances in pairs:
            fragment = fragment.strip().lower()
            if not fragment:
                raise ValueError("all-star fragment must not be empty")
            if appearances < 0:
                raise ValueError(f"appearances for {fragment!r} must be non-negative")
            entries.append((fragment, int(appearances)))
        return cls(entries=tuple(entries))

    def appearances(self, player: str) -> int:
        name = player.lower()
        for fragment, count in self.entries:
            if fragment in name:
                return count
        return 0


DEFAULT_ALL_STARS = AllStarRegistry.from_pairs(
    [
        ("frankie montas", 0),
        ("montas", 0),
        ("lucas giolito", 1),
        ("giolito", 1),
        ("tyler mahle", 0),
        ("mahle", 0),
        ("jesús lúzardo", 0),
        ("luzardo", 0),
        ("kyle hendricks", 1),
        ("hendricks", 1),
        ("mike foltynewicz", 1),
        ("foltynewicz", 1),
        ("shane bieber", 1),
        ("bieber", 1),
    ]
)

# Appearances credited to the reference pitcher in the comparison table.
DEFAULT_REFERENCE_ALL_STARS = 1
