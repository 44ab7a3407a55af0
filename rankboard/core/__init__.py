"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import StatsSettings, get_settings, get_global_settings
from .exceptions import (
    StatsEngineError,
    ConfigurationError,
    PlayerNotFoundError,
    InvalidComparisonError,
)
from .enums import Tier, Role, QueueType
from .logging import setup_logging, get_logger

__all__ = [
    # Config
    "StatsSettings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "StatsEngineError",
    "ConfigurationError",
    "PlayerNotFoundError",
    "InvalidComparisonError",
    # Enums
    "Tier",
    "Role",
    "QueueType",
    # Logging
    "setup_logging",
    "get_logger",
]
