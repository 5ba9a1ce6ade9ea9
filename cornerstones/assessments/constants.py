"""Centralized constants for VARK scoring and interpretation.

Tags are listed in their fixed precedence order. That order breaks ties
everywhere a single style has to be chosen: drift correction, sorting in the
interpreter, and the dominant-style rule used by personalization.
"""

from __future__ import annotations

from typing import Final, Tuple

__all__ = [
    "VARK_STYLES",
    "PERCENT_TOTAL",
    "NEUTRAL_PERCENTAGE",
    "DEFAULT_DOMAIN_WEIGHT",
    "MAX_DOMAIN_WEIGHT",
    "SIGNIFICANCE_THRESHOLD",
    "DOMINANT_THRESHOLD",
    "OPTIONS_PER_QUESTION",
]

VARK_STYLES: Final[Tuple[str, str, str, str]] = (
    "visual",
    "auditory",
    "reading_writing",
    "kinesthetic",
)
"""The four VARK style tags in precedence order."""

PERCENT_TOTAL: Final[int] = 100
"""Percentages of a scored profile always sum to this value."""

NEUTRAL_PERCENTAGE: Final[int] = 25
"""Share given to every style when no response carried weight."""

DEFAULT_DOMAIN_WEIGHT: Final[float] = 1.0
"""Weight applied to a response that does not state its domain weight."""

MAX_DOMAIN_WEIGHT: Final[float] = 100.0
"""Largest domain weight accepted from API clients."""

SIGNIFICANCE_THRESHOLD: Final[int] = 25
"""A style at or above this percentage counts toward multimodality.

Also the cut-off for reporting a secondary style.
"""

DOMINANT_THRESHOLD: Final[int] = 30
"""Default cut-off for the list of dominant styles shown on dashboards."""

OPTIONS_PER_QUESTION: Final[int] = 4
