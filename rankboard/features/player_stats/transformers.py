"""Queue filter and game normalizer.

Converts raw Match-V5 records into :class:`NormalizedGame` values for one
player. Only matches from the configured ranked queue qualify; a ranked match
that does not contain the player is counted as skipped, never raised.
"""

from typing import Dict, Iterable, List

import structlog

from rankboard.core.enums import Role
from rankboard.riot_api.models import MatchDTO, ParticipantDTO
from rankboard.utils.statistics import kda_ratio, safe_divide
from .schemas import NormalizationResult, NormalizedGame

logger = structlog.get_logger(__name__)

# Riot teamPosition codes
TEAM_POSITION_ROLES: Dict[str, Role] = {
    "TOP": Role.TOP,
    "JUNGLE": Role.JUNGLE,
    "MIDDLE": Role.MID,
    "BOTTOM": Role.ADC,
    "UTILITY": Role.SUPPORT,
}


def map_role(team_position: str) -> Role:
    """Map a team position code to a display role; anything unknown is Other."""
    return TEAM_POSITION_ROLES.get((team_position or "").upper(), Role.OTHER)


class GameTransformer:
    """Builds normalized games from match records."""

    @staticmethod
    def to_normalized_game(
        match: MatchDTO, participant: ParticipantDTO
    ) -> NormalizedGame:
        """
        Normalize one match from the point of view of one participant.

        :param match: Match record
        :param participant: The tracked player's participant record
        :returns: Normalized game
        """
        creep_score = participant.creep_score
        duration_minutes = match.game_duration / 60

        return NormalizedGame(
            match_id=match.match_id,
            win=participant.win,
            champion_name=participant.champion_name,
            champion_id=participant.champion_id,
            kills=participant.kills,
            deaths=participant.deaths,
            assists=participant.assists,
            kda_ratio=kda_ratio(
                participant.kills, participant.deaths, participant.assists
            ),
            creep_score=creep_score,
            cs_per_minute=safe_divide(creep_score, duration_minutes),
            duration_seconds=match.game_duration,
            game_creation=match.game_creation,
            role=map_role(participant.team_position),
            vision_score=participant.vision_score,
            damage_to_champions=participant.total_damage_dealt_to_champions,
        )


def normalize_matches(
    matches: Iterable[MatchDTO], puuid: str, ranked_queue_id: int
) -> NormalizationResult:
    """
    Filter matches to the ranked queue and normalize them for one player.

    Output order follows the input order; no sorting happens here.

    :param matches: Match records in any order
    :param puuid: Identity key of the tracked player
    :param ranked_queue_id: Queue id that qualifies a match
    :returns: Normalized games and counts of dropped inputs
    """
    games: List[NormalizedGame] = []
    skipped_match_ids: List[str] = []
    other_queue = 0

    for match in matches:
        if match.queue_id != ranked_queue_id:
            other_queue += 1
            continue

        participant = match.find_participant(puuid)
        if participant is None:
            logger.warning(
                "Ranked match without tracked participant, skipping",
                match_id=match.match_id,
                puuid=puuid,
            )
            skipped_match_ids.append(match.match_id)
            continue

        games.append(GameTransformer.to_normalized_game(match, participant))

    logger.debug(
        "Matches normalized",
        puuid=puuid,
        queue_id=ranked_queue_id,
        qualifying=len(games),
        skipped=len(skipped_match_ids),
        other_queue=other_queue,
    )

    return NormalizationResult(
        games=games,
        skipped_match_ids=skipped_match_ids,
        other_queue_matches=other_queue,
    )
