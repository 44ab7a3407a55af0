"""Ranked statistics engine for a fixed roster of League of Legends accounts.

The package turns already-fetched match and roster data into player
summaries, champion breakdowns, head-to-head comparisons and a leaderboard
ordering. Fetching is delegated to a gateway implementation supplied by the
caller.
"""

__version__ = "0.1.0"
