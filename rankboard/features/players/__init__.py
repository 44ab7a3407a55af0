"""Players feature module.

Roster entries as supplied by the player store, the leaderboard ordering over
them, and the gateway interface through which roster and match data arrive.
"""

from .schemas import RosterEntry
from .ranks import roster_sort_key, compare_roster_entries, sort_roster
from .gateway import PlayerDataGateway

__all__ = [
    "RosterEntry",
    "roster_sort_key",
    "compare_roster_entries",
    "sort_roster",
    "PlayerDataGateway",
]
