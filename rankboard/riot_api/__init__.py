"""
Riot API data models.

Only the response shapes consumed by the statistics engine are modelled here;
fetching them is the job of the caller's gateway implementation.
"""

from .models import MatchDTO, MatchInfoDTO, MatchMetadataDTO, ParticipantDTO

__all__ = [
    "MatchDTO",
    "MatchInfoDTO",
    "MatchMetadataDTO",
    "ParticipantDTO",
]
