"""
Overall player summary.

Folds the same normalized games that feed the champion aggregator into one
:class:`PlayerSummary`, including the recent form window and the favorite
role.
"""

from collections import Counter
from typing import Optional, Sequence

import structlog

from rankboard.core.enums import Role
from rankboard.core.exceptions import require_positive
from rankboard.features.players.schemas import RosterEntry
from rankboard.utils.statistics import kda_ratio, percentage, safe_divide
from ..schemas import (
    ChampionMap,
    NoRankedData,
    NormalizedGame,
    PlayerSummary,
    SummaryResult,
)
from .champions import ChampionAggregator

logger = structlog.get_logger(__name__)


class PlayerSummarizer:
    """Computes totals, averages, recent form and favorite role."""

    def __init__(
        self,
        recent_form_window: int = 10,
        champion_aggregator: Optional[ChampionAggregator] = None,
    ):
        """
        Initialize the summarizer.

        :param recent_form_window: Number of most recent games in the form window
        :param champion_aggregator: Aggregator used for the best champion
        """
        self.recent_form_window = require_positive(
            "recent_form_window", recent_form_window, component="PlayerSummarizer"
        )
        self.champion_aggregator = champion_aggregator or ChampionAggregator()

    def summarize(
        self,
        games: Sequence[NormalizedGame],
        roster_entry: RosterEntry,
        champions: Optional[ChampionMap] = None,
        skipped_matches: int = 0,
    ) -> SummaryResult:
        """
        Summarize a player's qualifying games.

        :param games: Qualifying games of the player, in any order
        :param roster_entry: Roster entry providing identity and rank fields
        :param champions: Champion map built from the same games; built here
            when omitted
        :param skipped_matches: Malformed matches dropped by the normalizer
        :returns: PlayerSummary, or NoRankedData for an empty game set
        """
        if not games:
            logger.info(
                "No ranked data for player",
                puuid=roster_entry.puuid,
                skipped_matches=skipped_matches,
            )
            return NoRankedData(
                puuid=roster_entry.puuid,
                tier=roster_entry.tier,
                division=roster_entry.division,
                league_points=roster_entry.league_points,
                skipped_matches=skipped_matches,
            )

        if champions is None:
            champions = self.champion_aggregator.aggregate(games)

        total_games = len(games)
        wins = sum(1 for game in games if game.win)
        losses = total_games - wins

        total_kills = sum(game.kills for game in games)
        total_deaths = sum(game.deaths for game in games)
        total_assists = sum(game.assists for game in games)
        total_cs = sum(game.creep_score for game in games)
        total_seconds = sum(game.duration_seconds for game in games)

        recent_wins, window = self._recent_form(games)

        summary = PlayerSummary(
            puuid=roster_entry.puuid,
            total_games=total_games,
            wins=wins,
            losses=losses,
            win_rate=percentage(wins, total_games),
            total_kills=total_kills,
            total_deaths=total_deaths,
            total_assists=total_assists,
            average_kills=total_kills / total_games,
            average_deaths=total_deaths / total_games,
            average_assists=total_assists / total_games,
            average_kda=kda_ratio(total_kills, total_deaths, total_assists),
            total_creep_score=total_cs,
            average_creep_score=total_cs / total_games,
            average_cs_per_minute=safe_divide(total_cs, total_seconds / 60),
            average_game_duration=total_seconds / total_games,
            favorite_role=self._favorite_role(games),
            recent_win_rate=percentage(recent_wins, window),
            recent_window=window,
            best_champion=self.champion_aggregator.best_champion(champions),
            tier=roster_entry.tier,
            division=roster_entry.division,
            league_points=roster_entry.league_points,
            skipped_matches=skipped_matches,
        )

        logger.debug(
            "Player summary completed",
            puuid=roster_entry.puuid,
            total_games=total_games,
            win_rate=summary.win_rate,
            recent_win_rate=summary.recent_win_rate,
            favorite_role=summary.favorite_role.value,
        )
        return summary

    def recent_games(self, games: Sequence[NormalizedGame]) -> list[NormalizedGame]:
        """Most recent games first, truncated to the form window."""
        return sort_by_recency(games)[: self.recent_form_window]

    def _recent_form(self, games: Sequence[NormalizedGame]) -> tuple[int, int]:
        """Wins and size of the recent form window."""
        window_games = self.recent_games(games)
        return sum(1 for game in window_games if game.win), len(window_games)

    @staticmethod
    def _favorite_role(games: Sequence[NormalizedGame]) -> Role:
        # Counter keeps first-seen order, so most_common breaks ties by first occurrence
        return Counter(game.role for game in games).most_common(1)[0][0]


def sort_by_recency(games: Sequence[NormalizedGame]) -> list[NormalizedGame]:
    """
    Order games most recent first by creation timestamp.

    The sort is stable, so games sharing a timestamp keep their input order.
    """
    return sorted(games, key=lambda game: game.game_creation, reverse=True)
