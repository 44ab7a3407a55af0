"""Statistical utility functions for safe calculations."""


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """
    Safely divide two numbers, returning default if denominator is zero.

    Args:
        numerator: The numerator
        denominator: The denominator
        default: Value to return if denominator is zero

    Returns:
        Result of division or default value
    """
    return numerator / denominator if denominator > 0 else default


def running_mean(previous_mean: float, sample: float, count: int) -> float:
    """
    Fold one more sample into an incremental mean.

    ``count`` is the number of samples *including* the new one, so the
    previous mean covered ``count - 1`` samples.

    Args:
        previous_mean: Mean of the first ``count - 1`` samples
        sample: New sample value
        count: Updated sample count (>= 1)

    Returns:
        Mean of all ``count`` samples
    """
    return (previous_mean * (count - 1) + sample) / count


def kda_ratio(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) / deaths, or kills + assists for a deathless record."""
    return safe_divide(kills + assists, deaths, default=float(kills + assists))


def percentage(part: float, whole: float) -> float:
    """Share of ``part`` in ``whole`` expressed in percent (0.0 when empty)."""
    return safe_divide(part * 100.0, whole)
