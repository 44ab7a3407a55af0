"""Player statistics feature module.

The aggregation and comparison engine: queue filtering and game
normalization, champion aggregation, player summaries, head-to-head
comparison, and the service that feeds it from a data gateway.
"""

from .schemas import (
    NormalizedGame,
    NormalizationResult,
    ChampionAggregate,
    PlayerSummary,
    NoRankedData,
    MetricPair,
    ChampionComparisonEntry,
    ComparisonResult,
    PlayerProfile,
)
from .transformers import GameTransformer, map_role, normalize_matches
from .aggregators import ChampionAggregator, PlayerSummarizer
from .comparator import compare_players
from .service import PlayerStatsService, build_player_profile

__all__ = [
    "NormalizedGame",
    "NormalizationResult",
    "ChampionAggregate",
    "PlayerSummary",
    "NoRankedData",
    "MetricPair",
    "ChampionComparisonEntry",
    "ComparisonResult",
    "PlayerProfile",
    "GameTransformer",
    "map_role",
    "normalize_matches",
    "ChampionAggregator",
    "PlayerSummarizer",
    "compare_players",
    "PlayerStatsService",
    "build_player_profile",
]
