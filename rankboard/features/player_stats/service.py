"""Player statistics service.

Wires the gateway (data already fetched and cached elsewhere) to the pure
engine. Every profile is a full recompute from one normalization pass, so
the summary and the champion map always describe the same game set.
"""

import asyncio
from typing import Iterable, List, Optional

import structlog

from rankboard.core.config import StatsSettings
from rankboard.core.exceptions import InvalidComparisonError, PlayerNotFoundError
from rankboard.features.players.gateway import PlayerDataGateway
from rankboard.features.players.ranks import sort_roster
from rankboard.features.players.schemas import RosterEntry
from rankboard.riot_api.models import MatchDTO
from .aggregators import ChampionAggregator, PlayerSummarizer
from .comparator import compare_players
from .schemas import ComparisonResult, PlayerProfile
from .transformers import normalize_matches

logger = structlog.get_logger(__name__)


def build_player_profile(
    matches: Iterable[MatchDTO],
    roster_entry: RosterEntry,
    settings: Optional[StatsSettings] = None,
) -> PlayerProfile:
    """
    Run one full aggregation pass for a player.

    :param matches: The player's match records, any queue, any order
    :param roster_entry: The player's roster entry
    :param settings: Engine options; defaults are used when omitted
    :returns: Player profile
    """
    settings = settings or StatsSettings()
    champion_aggregator = ChampionAggregator(settings.top_champion_count)
    summarizer = PlayerSummarizer(settings.recent_form_window, champion_aggregator)

    normalized = normalize_matches(
        matches, roster_entry.puuid, settings.ranked_queue_id
    )
    champions = champion_aggregator.aggregate(normalized.games)
    summary = summarizer.summarize(
        normalized.games,
        roster_entry,
        champions=champions,
        skipped_matches=normalized.skipped_matches,
    )

    return PlayerProfile(
        puuid=roster_entry.puuid,
        summary=summary,
        champions=champions,
        top_champions=champion_aggregator.top_champions(champions),
        recent_games=summarizer.recent_games(normalized.games),
        skipped_matches=normalized.skipped_matches,
    )


class PlayerStatsService:
    """Leaderboard, profile and comparison use cases over a data gateway."""

    def __init__(
        self, gateway: PlayerDataGateway, settings: Optional[StatsSettings] = None
    ):
        self.gateway = gateway
        self.settings = settings or StatsSettings()

    async def get_leaderboard(self) -> List[RosterEntry]:
        """Return the roster in leaderboard order."""
        roster = await self.gateway.get_roster()
        logger.info("Building leaderboard", players=len(roster))
        return sort_roster(roster)

    async def get_player_profile(self, player_id: str) -> PlayerProfile:
        """
        Build the profile of one tracked player.

        :param player_id: Player PUUID
        :returns: Player profile
        :raises PlayerNotFoundError: If the gateway does not know the player
        """
        roster_entry, matches = await self._fetch_player(
            player_id, "get_player_profile"
        )
        profile = build_player_profile(matches, roster_entry, self.settings)
        logger.info(
            "Player profile built",
            player_id=player_id,
            total_games=profile.summary.total_games,
            skipped_matches=profile.skipped_matches,
        )
        return profile

    async def compare_players(
        self, player1_id: str, player2_id: str
    ) -> ComparisonResult:
        """
        Compare two tracked players.

        Both players are fetched concurrently and their folds run in separate
        worker threads; each fold only touches its own accumulators.

        :param player1_id: PUUID of the first player
        :param player2_id: PUUID of the second player
        :returns: Comparison result with player1 on the first side
        :raises InvalidComparisonError: If both ids are the same
        :raises PlayerNotFoundError: If either player is unknown
        """
        if player1_id == player2_id:
            raise InvalidComparisonError(player1_id)

        (entry1, matches1), (entry2, matches2) = await asyncio.gather(
            self._fetch_player(player1_id, "compare_players"),
            self._fetch_player(player2_id, "compare_players"),
        )

        profile1, profile2 = await asyncio.gather(
            asyncio.to_thread(build_player_profile, matches1, entry1, self.settings),
            asyncio.to_thread(build_player_profile, matches2, entry2, self.settings),
        )

        logger.info(
            "Players compared",
            player1=player1_id,
            player2=player2_id,
        )
        return compare_players(
            profile1.summary, profile1.champions, profile2.summary, profile2.champions
        )

    async def _fetch_player(
        self, player_id: str, operation: str
    ) -> tuple[RosterEntry, List[MatchDTO]]:
        roster_entry = await self.gateway.get_player(player_id)
        if roster_entry is None:
            logger.warning("Player not found", player_id=player_id, operation=operation)
            raise PlayerNotFoundError(player_id, operation=operation)
        matches = await self.gateway.get_player_matches(player_id)
        return roster_entry, list(matches)
