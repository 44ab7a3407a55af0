"""
Champion aggregation for a single player.

Folds normalized games into one :class:`ChampionAggregate` per champion,
keeping creep score per minute as a running mean so memory stays constant
per champion no matter how many games are folded.
"""

from typing import Iterable, List

import structlog

from rankboard.core.exceptions import require_positive
from rankboard.utils.statistics import running_mean
from ..schemas import ChampionAggregate, ChampionMap, NormalizedGame

logger = structlog.get_logger(__name__)


class ChampionAggregator:
    """Builds per-champion statistics and the bounded top champion list."""

    def __init__(self, top_champion_count: int = 5):
        """
        Initialize the champion aggregator.

        Args:
            top_champion_count: Default length of the top champion list
        """
        self.top_champion_count = require_positive(
            "top_champion_count", top_champion_count, component="ChampionAggregator"
        )

    def aggregate(self, games: Iterable[NormalizedGame]) -> ChampionMap:
        """
        Fold games into a champion map.

        Entries appear in the order each champion is first encountered.

        Args:
            games: Normalized games of one player

        Returns:
            Mapping of champion name to aggregate
        """
        champions: ChampionMap = {}

        for game in games:
            entry = champions.get(game.champion_name)
            if entry is None:
                entry = ChampionAggregate(champion_name=game.champion_name)
                champions[game.champion_name] = entry
            self._apply_game(entry, game)

        logger.debug(
            "Champion aggregation completed",
            champions=len(champions),
            games=sum(entry.games for entry in champions.values()),
        )
        return champions

    @staticmethod
    def _apply_game(entry: ChampionAggregate, game: NormalizedGame) -> None:
        entry.games += 1
        if game.win:
            entry.wins += 1
        else:
            entry.losses += 1
        entry.kills += game.kills
        entry.deaths += game.deaths
        entry.assists += game.assists
        entry.cs_per_minute = running_mean(
            entry.cs_per_minute, game.cs_per_minute, entry.games
        )

    def top_champions(
        self, champions: ChampionMap, count: int | None = None
    ) -> List[ChampionAggregate]:
        """
        Select the most played champions.

        Ordered by games played, then win rate (both descending), then
        champion name.

        Args:
            champions: Champion map from :meth:`aggregate`
            count: How many entries to keep; defaults to the configured count

        Returns:
            At most ``count`` aggregates, references into ``champions``
        """
        if count is None:
            count = self.top_champion_count
        else:
            require_positive("top_champion_count", count, component="ChampionAggregator")

        ranked = sorted(
            champions.values(),
            key=lambda entry: (-entry.games, -entry.winrate, entry.champion_name),
        )
        return ranked[:count]

    def best_champion(self, champions: ChampionMap) -> ChampionAggregate | None:
        """Top-1 champion, or None for an empty map."""
        top = self.top_champions(champions, 1)
        return top[0] if top else None
