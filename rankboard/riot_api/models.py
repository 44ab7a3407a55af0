"""Pydantic models for Riot Match-V5 response data."""

from typing import Optional, List
from pydantic import BaseModel, Field, ConfigDict, field_validator


class ParticipantDTO(BaseModel):
    """Match participant information."""

    puuid: str
    champion_id: int = Field(0, alias="championId")
    champion_name: str = Field(..., alias="championName")
    kills: int = Field(0, ge=0)
    deaths: int = Field(0, ge=0)
    assists: int = Field(0, ge=0)
    total_minions_killed: int = Field(0, ge=0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, ge=0, alias="neutralMinionsKilled")
    team_position: str = Field("", alias="teamPosition")
    win: bool = False
    vision_score: float = Field(0.0, alias="visionScore")
    total_damage_dealt_to_champions: int = Field(
        0, alias="totalDamageDealtToChampions"
    )

    @field_validator("neutral_minions_killed", mode="before")
    @classmethod
    def default_missing_neutral_kills(cls, v: Optional[int]) -> int:
        """Older payloads send null for neutral minion kills."""
        return 0 if v is None else v

    @field_validator("team_position", mode="before")
    @classmethod
    def default_missing_position(cls, v: Optional[str]) -> str:
        return v or ""

    @property
    def creep_score(self) -> int:
        """Lane minions plus neutral (jungle) minions."""
        return self.total_minions_killed + self.neutral_minions_killed

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class MatchInfoDTO(BaseModel):
    """Match information."""

    game_creation: int = Field(..., alias="gameCreation")
    game_duration: int = Field(..., ge=0, alias="gameDuration")
    queue_id: int = Field(..., alias="queueId")
    participants: List[ParticipantDTO] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class MatchMetadataDTO(BaseModel):
    """Match metadata."""

    match_id: str = Field(..., alias="matchId")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class MatchDTO(BaseModel):
    """Complete match data, immutable once retrieved."""

    metadata: MatchMetadataDTO
    info: MatchInfoDTO

    @property
    def match_id(self) -> str:
        """Get match ID from metadata."""
        return self.metadata.match_id

    @property
    def queue_id(self) -> int:
        return self.info.queue_id

    @property
    def game_creation(self) -> int:
        """Creation timestamp in epoch milliseconds."""
        return self.info.game_creation

    @property
    def game_duration(self) -> int:
        """Duration in seconds."""
        return self.info.game_duration

    def find_participant(self, puuid: str) -> Optional[ParticipantDTO]:
        """Return the participant with the given PUUID, if present."""
        for participant in self.info.participants:
            if participant.puuid == puuid:
                return participant
        return None

    model_config = ConfigDict(populate_by_name=True, frozen=True)
