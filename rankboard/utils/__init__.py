"""Utility functions and helpers."""

from .statistics import safe_divide, running_mean, kda_ratio, percentage

__all__ = [
    "safe_divide",
    "running_mean",
    "kda_ratio",
    "percentage",
]
