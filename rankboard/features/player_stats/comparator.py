"""
Head-to-head comparison of two players.

The comparison is a pure function of two summaries and two champion maps.
It pairs metrics up but never decides who is better: whether a higher value
wins is a per-metric choice left to the caller (see ``MetricPair.leader``).
"""

from typing import Dict, List, Optional

import structlog

from .schemas import (
    ChampionComparisonEntry,
    ChampionMap,
    ComparisonResult,
    MetricPair,
    SummaryResult,
)

logger = structlog.get_logger(__name__)

# Overall metric name -> PlayerSummary attribute
OVERALL_METRICS: Dict[str, str] = {
    "winrate": "win_rate",
    "kda": "average_kda",
    "kills": "average_kills",
    "deaths": "average_deaths",
    "assists": "average_assists",
    "cs": "average_creep_score",
}

# Direction hint for presentation layers; the comparison itself ignores it
HIGHER_IS_BETTER: Dict[str, bool] = {
    "winrate": True,
    "kda": True,
    "kills": True,
    "deaths": False,
    "assists": True,
    "cs": True,
}


def _metric_value(summary: SummaryResult, attribute: str) -> Optional[float]:
    if not summary.has_data:
        return None
    return float(getattr(summary, attribute))


def champion_union(champions1: ChampionMap, champions2: ChampionMap) -> List[str]:
    """
    Champion names played by either player, alphabetically.

    Case-insensitive order first, exact name as the tie-break, so the result
    never depends on dictionary insertion order.
    """
    names = set(champions1) | set(champions2)
    return sorted(names, key=lambda name: (name.casefold(), name))


def compare_players(
    summary1: SummaryResult,
    champions1: ChampionMap,
    summary2: SummaryResult,
    champions2: ChampionMap,
) -> ComparisonResult:
    """
    Build the comparison result for two players.

    :param summary1: Summary of the first player (or NoRankedData)
    :param champions1: Champion map of the first player
    :param summary2: Summary of the second player (or NoRankedData)
    :param champions2: Champion map of the second player
    :returns: ComparisonResult; swapping the inputs only swaps the sides
    """
    overall = {
        metric: MetricPair(
            player1=_metric_value(summary1, attribute),
            player2=_metric_value(summary2, attribute),
        )
        for metric, attribute in OVERALL_METRICS.items()
    }

    champion_comparison = [
        ChampionComparisonEntry(
            champion=name,
            player1=champions1.get(name),
            player2=champions2.get(name),
        )
        for name in champion_union(champions1, champions2)
    ]

    logger.debug(
        "Player comparison completed",
        player1=summary1.puuid,
        player2=summary2.puuid,
        champions=len(champion_comparison),
        shared_champions=sum(
            1
            for entry in champion_comparison
            if entry.player1 is not None and entry.player2 is not None
        ),
    )

    return ComparisonResult(
        summary1=summary1,
        summary2=summary2,
        champions1=champions1,
        champions2=champions2,
        overall=overall,
        champion_comparison=champion_comparison,
    )
