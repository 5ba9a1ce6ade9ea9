"""Rounding and division helpers shared by scoring and analytics."""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP

__all__ = ["round_half_up", "safe_div", "clamp"]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's built-in ``round`` uses banker's rounding (``round(12.5) == 12``);
    percentages here follow the conventional half-up rule instead.

    Example:
        >>> round_half_up(12.5)
        13
        >>> round_half_up(33.333)
        33
    """
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def safe_div(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning ``default`` when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator


def clamp(value: int, min_value: int, max_value: int) -> int:
    if min_value > max_value:
        raise ValueError(f"min_value ({min_value}) must be <= max_value ({max_value})")
    return max(min_value, min(value, max_value))
