"""Result types produced by the player statistics engine.

Normalized games, summaries and comparison results are frozen dataclasses.
``ChampionAggregate`` is the one mutable type: it is updated in place while a
single aggregation pass folds a player's games and is not touched afterwards.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from rankboard.core.enums import Role, Tier
from rankboard.utils.statistics import kda_ratio


@dataclass(frozen=True)
class NormalizedGame:
    """One qualifying ranked game seen from the tracked player's side."""

    match_id: str
    win: bool
    champion_name: str
    champion_id: int
    kills: int
    deaths: int
    assists: int
    kda_ratio: float
    creep_score: int
    cs_per_minute: float
    duration_seconds: int
    game_creation: int
    role: Role
    vision_score: float = 0.0
    damage_to_champions: int = 0

    @property
    def kda_line(self) -> str:
        """Kills/deaths/assists as shown on a scoreboard, e.g. ``10/2/5``."""
        return f"{self.kills}/{self.deaths}/{self.assists}"


@dataclass(frozen=True)
class NormalizationResult:
    """Output of the queue filter: qualifying games plus dropped-input counts."""

    games: List[NormalizedGame]
    skipped_match_ids: List[str] = field(default_factory=list)
    other_queue_matches: int = 0

    @property
    def skipped_matches(self) -> int:
        """Ranked matches dropped because the player was not among participants."""
        return len(self.skipped_match_ids)


@dataclass
class ChampionAggregate:
    """Running statistics for one champion of one player."""

    champion_name: str
    wins: int = 0
    losses: int = 0
    games: int = 0
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    cs_per_minute: float = 0.0

    @property
    def total(self) -> int:
        return self.wins + self.losses

    @property
    def kda(self) -> float:
        return kda_ratio(self.kills, self.deaths, self.assists)

    @property
    def winrate(self) -> int:
        """Win rate in whole percent, halves rounded up."""
        if self.games == 0:
            return 0
        return int(math.floor(self.wins / self.games * 100 + 0.5))


ChampionMap = Dict[str, ChampionAggregate]


@dataclass(frozen=True)
class PlayerSummary:
    """Overall ranked performance of one player for one aggregation run."""

    puuid: str
    total_games: int
    wins: int
    losses: int
    win_rate: float
    total_kills: int
    total_deaths: int
    total_assists: int
    average_kills: float
    average_deaths: float
    average_assists: float
    average_kda: float
    total_creep_score: int
    average_creep_score: float
    average_cs_per_minute: float
    average_game_duration: float
    favorite_role: Role
    recent_win_rate: float
    recent_window: int
    best_champion: Optional[ChampionAggregate]
    tier: Optional[Tier] = None
    division: Optional[int] = None
    league_points: Optional[int] = None
    skipped_matches: int = 0

    has_data = True


@dataclass(frozen=True)
class NoRankedData:
    """Explicit marker for a player with no qualifying ranked games.

    It deliberately carries no averages, so it can never be mistaken for a
    player who performed at zero.
    """

    puuid: str
    tier: Optional[Tier] = None
    division: Optional[int] = None
    league_points: Optional[int] = None
    skipped_matches: int = 0

    has_data = False
    total_games = 0


SummaryResult = Union[PlayerSummary, NoRankedData]


@dataclass(frozen=True)
class MetricPair:
    """One overall metric for both players; None marks a side without data."""

    player1: Optional[float]
    player2: Optional[float]

    def leader(self, higher_is_better: bool = True) -> Optional[int]:
        """
        Which side leads on this metric, given the caller's direction.

        :param higher_is_better: False for metrics such as deaths
        :returns: 1 or 2 for the leading player, None on a tie or missing data
        """
        if self.player1 is None or self.player2 is None:
            return None
        if self.player1 == self.player2:
            return None
        player1_ahead = self.player1 > self.player2
        if not higher_is_better:
            player1_ahead = not player1_ahead
        return 1 if player1_ahead else 2


@dataclass(frozen=True)
class ChampionComparisonEntry:
    """One champion played by at least one of the compared players."""

    champion: str
    player1: Optional[ChampionAggregate]
    player2: Optional[ChampionAggregate]


@dataclass(frozen=True)
class ComparisonResult:
    """Head-to-head comparison of two players."""

    summary1: SummaryResult
    summary2: SummaryResult
    champions1: ChampionMap
    champions2: ChampionMap
    overall: Dict[str, MetricPair]
    champion_comparison: List[ChampionComparisonEntry]


@dataclass(frozen=True)
class PlayerProfile:
    """Everything the profile page shows for one player."""

    puuid: str
    summary: SummaryResult
    champions: ChampionMap
    top_champions: List[ChampionAggregate]
    recent_games: List[NormalizedGame]
    skipped_matches: int = 0
