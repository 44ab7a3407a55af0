"""Shared fixtures: builders for match records, normalized games and roster entries."""

import pytest

from rankboard.core.enums import QueueType, Role
from rankboard.features.player_stats.schemas import NormalizedGame
from rankboard.features.players.schemas import RosterEntry
from rankboard.riot_api.models import MatchDTO
from rankboard.utils.statistics import kda_ratio, safe_divide

PUUID = "puuid-tracked-player"
OTHER_PUUID = "puuid-other-player"
BASE_CREATION_MS = 1_700_000_000_000


@pytest.fixture
def puuid():
    return PUUID


@pytest.fixture
def make_participant():
    """Build a raw participant payload using Riot's camelCase keys."""

    def _make(
        puuid=PUUID,
        champion="Ahri",
        kills=5,
        deaths=3,
        assists=7,
        minions=150,
        neutral=10,
        position="MIDDLE",
        win=True,
        **extra,
    ):
        payload = {
            "puuid": puuid,
            "championId": 103,
            "championName": champion,
            "kills": kills,
            "deaths": deaths,
            "assists": assists,
            "totalMinionsKilled": minions,
            "neutralMinionsKilled": neutral,
            "teamPosition": position,
            "win": win,
            "visionScore": 20.0,
            "totalDamageDealtToChampions": 18000,
        }
        payload.update(extra)
        return payload

    return _make


@pytest.fixture
def make_match(make_participant):
    """Build a MatchDTO with the tracked player and one opponent."""

    def _make(
        match_id="EUW1_1",
        queue_id=QueueType.RANKED_SOLO_5X5.value,
        creation=BASE_CREATION_MS,
        duration=1800,
        participants=None,
        **participant_kwargs,
    ):
        if participants is None:
            participants = [
                make_participant(**participant_kwargs),
                make_participant(puuid=OTHER_PUUID, champion="Zed", win=False),
            ]
        return MatchDTO.model_validate(
            {
                "metadata": {"matchId": match_id},
                "info": {
                    "gameCreation": creation,
                    "gameDuration": duration,
                    "queueId": queue_id,
                    "participants": participants,
                },
            }
        )

    return _make


@pytest.fixture
def make_game():
    """Build a NormalizedGame directly, bypassing the normalizer."""
    counter = {"next": 0}

    def _make(
        win=True,
        champion="Ahri",
        kills=5,
        deaths=3,
        assists=7,
        cs=200,
        duration=1800,
        creation=None,
        role=Role.MID,
        match_id=None,
    ):
        counter["next"] += 1
        index = counter["next"]
        return NormalizedGame(
            match_id=match_id or f"EUW1_{index}",
            win=win,
            champion_name=champion,
            champion_id=0,
            kills=kills,
            deaths=deaths,
            assists=assists,
            kda_ratio=kda_ratio(kills, deaths, assists),
            creep_score=cs,
            cs_per_minute=safe_divide(cs, duration / 60),
            duration_seconds=duration,
            game_creation=creation if creation is not None else BASE_CREATION_MS - index,
            role=role,
        )

    return _make


@pytest.fixture
def roster_entry():
    return RosterEntry(
        puuid=PUUID,
        summoner_name="Tracked",
        tier="GOLD",
        division=2,
        league_points=45,
    )


@pytest.fixture
def scenario_games(make_game):
    """Three qualifying games: two on Ahri (win, loss) and one Lux win."""
    return [
        make_game(True, "Ahri", 10, 2, 5, cs=20, duration=1200, role=Role.MID),
        make_game(False, "Ahri", 3, 5, 2, cs=15, duration=1500, role=Role.MID),
        make_game(True, "Lux", 8, 1, 10, cs=30, duration=1800, role=Role.SUPPORT),
    ]
