"""
Aggregators over normalized games.

Each aggregator folds one player's qualifying games; two players can be
folded concurrently because no aggregator keeps state between calls.
"""

from .champions import ChampionAggregator
from .summary import PlayerSummarizer

__all__ = ["ChampionAggregator", "PlayerSummarizer"]
