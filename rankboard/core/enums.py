"""Shared enums used across features.

This module provides a single source of truth for enums used in both the
input models and the derived statistics.
"""

from enum import Enum
from typing import Dict


class Tier(str, Enum):
    """League of Legends rank tiers."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"


# Declaration order above is lowest-to-highest
TIER_ORDER: Dict[Tier, int] = {tier: index + 1 for index, tier in enumerate(Tier)}


class Role(str, Enum):
    """Display roles derived from the Riot team position code."""

    TOP = "Top"
    JUNGLE = "Jungle"
    MID = "Mid"
    ADC = "ADC"
    SUPPORT = "Support"
    OTHER = "Other"


class QueueType(int, Enum):
    """Riot API queue types for match filtering."""

    RANKED_SOLO_5X5 = 420
    RANKED_FLEX_5X5 = 440
    NORMAL_DRAFT_5X5 = 400
    NORMAL_BLIND_PICK_5X5 = 430
    ARAM = 450
