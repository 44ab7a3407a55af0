"""
Engine custom exceptions.

Data-shape problems inside match records are never raised; they degrade to
documented defaults. The exceptions here cover caller errors only: invalid
configuration, unknown players and meaningless comparisons.
"""

from typing import Any, Dict, Optional


class StatsEngineError(Exception):
    """Base exception for all statistics engine errors."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.component = component
        self.operation = operation
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        if self.component and self.operation:
            return f"[{self.component}.{self.operation}] {self.message}"
        return self.message


class ConfigurationError(StatsEngineError, ValueError):
    """Raised synchronously when an engine option has an invalid value."""

    def __init__(
        self,
        message: str,
        option: Optional[str] = None,
        value: Optional[Any] = None,
        component: Optional[str] = None,
        operation: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        config_context: Dict[str, Any] = {}
        if option:
            config_context["option"] = option
        if value is not None:
            config_context["value"] = str(value)

        super().__init__(
            message=f"Invalid configuration: {message}",
            component=component,
            operation=operation,
            context=config_context,
            original_error=original_error,
        )
        self.option = option


class PlayerNotFoundError(StatsEngineError, LookupError):
    """Raised by the service layer when the gateway has no such player."""

    def __init__(self, player_id: str, operation: Optional[str] = None):
        super().__init__(
            message=f"Player not found: {player_id}",
            component="PlayerStatsService",
            operation=operation,
            context={"player_id": player_id},
        )
        self.player_id = player_id


class InvalidComparisonError(StatsEngineError, ValueError):
    """Raised when a head-to-head comparison is requested for one player."""

    def __init__(self, player_id: str):
        super().__init__(
            message="Two different players are required for a comparison",
            component="PlayerStatsService",
            operation="compare_players",
            context={"player_id": player_id},
        )
        self.player_id = player_id


def require_positive(option: str, value: Any, component: Optional[str] = None) -> int:
    """
    Validate an integer option that must be at least 1.

    :param option: Option name used in the error message
    :param value: Value supplied by the caller
    :param component: Component reporting the error
    :returns: The validated value
    :raises ConfigurationError: If the value is not an integer >= 1
    """
    # bool is an int subclass but never a meaningful window size
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(
            f"{option} must be an integer >= 1",
            option=option,
            value=value,
            component=component,
        )
    return value
