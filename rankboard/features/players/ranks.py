"""Leaderboard ordering over roster entries.

Entries are ordered lexicographically by:

1. ranked before unranked (unranked entries compare equal to each other,
   so a stable sort keeps their input order),
2. tier, strongest first,
3. division ascending (division 1 first, absent division counts as 0),
4. league points descending (absent LP counts as 0).

The order is derived from a tuple sort key, which makes it a total preorder
by construction.
"""

from typing import Iterable, List, Tuple

import structlog

from rankboard.core.enums import TIER_ORDER
from .schemas import RosterEntry

logger = structlog.get_logger(__name__)

RosterSortKey = Tuple[int, int, int, int]

# Every unranked entry shares this key
_UNRANKED_KEY: RosterSortKey = (1, 0, 0, 0)


def roster_sort_key(entry: RosterEntry) -> RosterSortKey:
    """
    Build the ascending sort key of a roster entry.

    :param entry: Roster entry
    :returns: Tuple key; smaller keys sort first
    """
    if entry.tier is None:
        return _UNRANKED_KEY
    return (
        0,
        -TIER_ORDER[entry.tier],
        entry.division or 0,
        -(entry.league_points or 0),
    )


def compare_roster_entries(a: RosterEntry, b: RosterEntry) -> int:
    """
    Three-way comparison of two roster entries.

    :returns: Negative if ``a`` ranks above ``b``, positive if below, 0 if tied
    """
    key_a = roster_sort_key(a)
    key_b = roster_sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def sort_roster(entries: Iterable[RosterEntry]) -> List[RosterEntry]:
    """
    Return the roster in leaderboard order without mutating the input.

    :param entries: Roster entries in any order
    :returns: New list, strongest entry first
    """
    ordered = sorted(entries, key=roster_sort_key)
    logger.debug(
        "Roster sorted",
        entries=len(ordered),
        unranked=sum(1 for entry in ordered if entry.tier is None),
    )
    return ordered

