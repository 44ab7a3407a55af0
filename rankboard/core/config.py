"""Configuration settings for the statistics engine."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from dotenv import load_dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .enums import QueueType
from .exceptions import ConfigurationError, require_positive

# Load environment variables from .env file
load_dotenv()

# camelCase option names accepted by StatsSettings.from_options
OPTION_ALIASES: Dict[str, str] = {
    "rankedQueueId": "ranked_queue_id",
    "recentFormWindow": "recent_form_window",
    "topChampionCount": "top_champion_count",
    "logLevel": "log_level",
}


class StatsSettings(BaseSettings):
    """Engine options loaded from ``RANKBOARD_*`` environment variables."""

    ranked_queue_id: int = Field(
        default=QueueType.RANKED_SOLO_5X5.value,
        description="Queue id of the competitive mode that is aggregated",
    )
    recent_form_window: int = Field(
        default=10, ge=1, description="Number of most recent games in the form window"
    )
    top_champion_count: int = Field(
        default=5, ge=1, description="Length of the bounded champion list"
    )
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="RANKBOARD_",
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "StatsSettings":
        """Build settings from a caller-supplied option mapping.

        Both the snake_case field names and the camelCase option names
        (``rankedQueueId``, ``recentFormWindow``, ``topChampionCount``) are
        accepted. Unknown keys are rejected.

        :param options: Option mapping
        :returns: Validated settings
        :raises ConfigurationError: If an option is unknown or invalid
        """
        values: Dict[str, Any] = {}
        for key, value in options.items():
            field_name = OPTION_ALIASES.get(key, key)
            if field_name not in cls.model_fields:
                raise ConfigurationError(
                    f"unknown option '{key}'",
                    option=key,
                    component="StatsSettings",
                    operation="from_options",
                )
            values[field_name] = value

        _check_integer_options(values)

        try:
            return cls(**values)
        except ValidationError as e:
            first = e.errors()[0]
            option = ".".join(str(part) for part in first.get("loc", ()))
            raise ConfigurationError(
                first.get("msg", "validation failed"),
                option=option or None,
                value=first.get("input"),
                component="StatsSettings",
                operation="from_options",
                original_error=e,
            ) from e


def _check_integer_options(values: Dict[str, Any]) -> None:
    """Reject bool, float and string values pydantic would otherwise coerce."""
    for option in ("recent_form_window", "top_champion_count"):
        if option in values:
            require_positive(option, values[option], component="StatsSettings")

    if "ranked_queue_id" not in values:
        return
    queue_id = values["ranked_queue_id"]
    if isinstance(queue_id, bool) or not isinstance(queue_id, int):
        raise ConfigurationError(
            "ranked_queue_id must be an integer",
            option="ranked_queue_id",
            value=queue_id,
            component="StatsSettings",
            operation="from_options",
        )


def get_settings() -> StatsSettings:
    """Get engine settings instance."""
    return StatsSettings()


# Create a global settings instance lazily
settings: StatsSettings | None = None


def get_global_settings() -> StatsSettings:
    """Get or create the global settings instance."""
    global settings
    if settings is None:
        settings = get_settings()
    return settings
