"""
Player data gateway interface.

The statistics engine never talks to the Riot API or the player store
directly. Whatever backend holds the roster and the cached match history
implements this interface; caching, staleness, retries and rate limiting all
live behind it.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from rankboard.riot_api.models import MatchDTO
from .schemas import RosterEntry


class PlayerDataGateway(ABC):
    """Async source of roster entries and already-fetched match records."""

    @abstractmethod
    async def get_roster(self) -> List[RosterEntry]:
        """Return every tracked roster entry, in storage order."""

    @abstractmethod
    async def get_player(self, player_id: str) -> Optional[RosterEntry]:
        """
        Return the roster entry for a player.

        :param player_id: Player PUUID
        :returns: Roster entry, or None if the player is not tracked
        """

    @abstractmethod
    async def get_player_matches(self, player_id: str) -> List[MatchDTO]:
        """
        Return the stored match history of a player.

        Any queue may be present; the engine filters to the ranked queue.

        :param player_id: Player PUUID
        :returns: Finite list of match records
        """
