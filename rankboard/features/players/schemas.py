"""Pydantic schemas for roster entries."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from rankboard.core.enums import Tier

ROMAN_DIVISIONS = {"I": 1, "II": 2, "III": 3, "IV": 4}
DIVISION_NUMERALS = {number: numeral for numeral, number in ROMAN_DIVISIONS.items()}


class RosterEntry(BaseModel):
    """One tracked account with its current solo queue rank.

    The player store historically names the tier ``rank`` and league points
    ``lp``; both spellings are accepted on input.
    """

    puuid: str = Field(..., description="Player's PUUID, the match identity key")
    summoner_name: str = Field(
        "",
        validation_alias=AliasChoices("summoner_name", "summonerName", "name"),
        description="Display name",
    )
    tier: Optional[Tier] = Field(
        None,
        validation_alias=AliasChoices("tier", "rank"),
        description="Rank tier, None when unranked",
    )
    division: Optional[int] = Field(
        None, ge=1, le=4, description="Division within the tier (1 is strongest)"
    )
    league_points: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("league_points", "leaguePoints", "lp"),
        description="League points",
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("tier", mode="before")
    @classmethod
    def normalize_tier(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            # "UNRANKED" and empty strings both mean no tier
            if not v or v == "UNRANKED":
                return None
        return v

    @field_validator("division", mode="before")
    @classmethod
    def parse_division(cls, v: Any) -> Any:
        """Accept Riot's Roman numeral divisions ("I".."IV") as well as ints."""
        if isinstance(v, str):
            v = v.strip().upper()
            if not v:
                return None
            if v in ROMAN_DIVISIONS:
                return ROMAN_DIVISIONS[v]
        return v

    @property
    def is_ranked(self) -> bool:
        return self.tier is not None

    @property
    def display_rank(self) -> str:
        """Get the display rank (e.g., 'Gold II')."""
        if self.tier is None:
            return "Unranked"
        if self.division in DIVISION_NUMERALS:
            return f"{self.tier.value.title()} {DIVISION_NUMERALS[self.division]}"
        return self.tier.value.title()
