"""Arbitration eligibility tiers derived from major-league service time."""

from __future__ import annotations

from enum import Enum


class ArbitrationTier(str, Enum):
    PRE_ARB = "Pre-Arb"
    FIRST = "1st Arb"
    SECOND = "2nd Arb"
    THIRD = "3rd Arb"
    FOURTH = "4th Arb"
    FREE_AGENT = "FA Eligible"


# Lower MLS bound of each tier, checked from the top down.
_TIER_THRESHOLDS = (
    (6.0, ArbitrationTier.FREE_AGENT),
    (5.1, ArbitrationTier.FOURTH),
    (4.1, ArbitrationTier.THIRD),
    (3.15, ArbitrationTier.SECOND),
    (3.0, ArbitrationTier.FIRST),
)


def arbitration_tier(mls: float) -> ArbitrationTier:
    for threshold, tier in _TIER_THRESHOLDS:
        if mls >= threshold:
            return tier
    return ArbitrationTier.PRE_ARB
