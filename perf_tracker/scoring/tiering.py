"""
scoring/tiering.py

Maps a clamped performance score to one of six ordered tiers.

Thresholds (inclusive lower bounds, highest first):
    >= 90  Diamond   promotion + bonus
    >= 80  Gold      raise
    >= 70  Silver    no change, good standing
    >= 60  Bronze    no change, improvement required
    >= 50  Warning   minor penalty
     < 50  RedZone   major penalty
"""

from decimal import Decimal
from typing import Dict, List, Tuple

from perf_tracker.models.enumerations import Tier
from perf_tracker.scoring.utils import Number, to_decimal

TIER_THRESHOLDS: List[Tuple[Decimal, Tier]] = [
    (Decimal("90"), Tier.DIAMOND),
    (Decimal("80"), Tier.GOLD),
    (Decimal("70"), Tier.SILVER),
    (Decimal("60"), Tier.BRONZE),
    (Decimal("50"), Tier.WARNING),
]

SUGGESTED_ACTIONS: Dict[Tier, str] = {
    Tier.DIAMOND: "Promotion + bonus",
    Tier.GOLD: "Raise",
    Tier.SILVER: "No change - good standing",
    Tier.BRONZE: "No change - improvement required",
    Tier.WARNING: "Minor penalty",
    Tier.RED_ZONE: "Major penalty",
}


def rank_tier(score: Number) -> Tier:
    """
    Return the tier for a score in [0, 100].

    Callers pass the output of compute_score(), which is already clamped.
    Values outside the range fall through the same thresholds.

    Examples:
        >>> rank_tier(89.9)
        <Tier.GOLD: 'Gold'>
        >>> rank_tier(90)
        <Tier.DIAMOND: 'Diamond'>
    """
    value = to_decimal(score)
    for lower_bound, tier in TIER_THRESHOLDS:
        if value >= lower_bound:
            return tier
    return Tier.RED_ZONE


def suggested_action(tier: Tier) -> str:
    """Descriptive HR action for a tier."""
    return SUGGESTED_ACTIONS[tier]
