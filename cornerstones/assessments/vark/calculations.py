"""Pure VARK scoring detached from I/O concerns.

Every function here is deterministic, allocates its own accumulators and
never raises on degenerate input: an empty or weightless response set falls
back to an even 25/25/25/25 profile.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Mapping

from cornerstones.assessments.constants import (
    DEFAULT_DOMAIN_WEIGHT,
    DOMINANT_THRESHOLD,
    NEUTRAL_PERCENTAGE,
    PERCENT_TOTAL,
    VARK_STYLES,
)
from cornerstones.core.numeric import round_half_up
from .types import PercentageScoreVector, Response

__all__ = [
    "aggregate_style_weights",
    "calculate_scores",
    "dominant_style",
    "dominant_styles",
]


def _effective_weight(response: Response) -> float | None:
    weight = response.domain_weight
    if weight is None:
        return DEFAULT_DOMAIN_WEIGHT
    weight = float(weight)
    return weight if math.isfinite(weight) else None


def aggregate_style_weights(responses: Iterable[Response], scale: float = 1.0) -> dict[str, float]:
    """Fold responses into raw weighted totals per style.

    Responses whose ``selected_style`` is not one of the four tags are
    skipped without error, as are responses carrying an infinite or NaN
    weight. A missing (``None``) ``domain_weight`` counts as 1.0. Each
    weight is divided by ``scale`` before it is added.
    """
    totals = {style: 0.0 for style in VARK_STYLES}
    for response in responses:
        style = response.selected_style
        if style not in totals:
            continue
        weight = _effective_weight(response)
        if weight is None:
            continue
        totals[style] += weight / scale
    return totals


def _largest_weight(responses: Iterable[Response]) -> float:
    weights = [
        abs(weight)
        for weight in (_effective_weight(r) for r in responses if r.selected_style in VARK_STYLES)
        if weight is not None
    ]
    return max(weights, default=1.0) or 1.0


def calculate_scores(responses: Iterable[Response]) -> PercentageScoreVector:
    """Convert weighted responses into percentages that sum to exactly 100.

    Each style gets ``round_half_up(weight / total * 100)``. Independent
    rounding can leave the sum at 99 or 101; the difference is added to the
    highest percentage (earliest in precedence order on ties).

    Weights large enough to overflow the float sum are rescaled by the
    largest weight first, so the proportions survive.

    Example:
        >>> calculate_scores([
        ...     Response("q1", "d1", "visual", 3.0),
        ...     Response("q2", "d1", "auditory", 1.0),
        ... ]).as_dict()
        {'visual': 75, 'auditory': 25, 'reading_writing': 0, 'kinesthetic': 0}
    """
    responses = list(responses)
    raw = aggregate_style_weights(responses)
    total = sum(raw.values())
    if not math.isfinite(total):
        raw = aggregate_style_weights(responses, scale=_largest_weight(responses))
        total = sum(raw.values())
    if not (math.isfinite(total) and total > 0):
        return PercentageScoreVector(**{style: NEUTRAL_PERCENTAGE for style in VARK_STYLES})

    percentages = {style: round_half_up(raw[style] / total * PERCENT_TOTAL) for style in VARK_STYLES}
    drift = PERCENT_TOTAL - sum(percentages.values())
    if drift:
        leader = max(VARK_STYLES, key=lambda style: percentages[style])
        percentages[leader] += drift
    return PercentageScoreVector(**percentages)


def dominant_style(scores: PercentageScoreVector | Mapping[str, int]) -> str:
    """Return the tag with the highest percentage, precedence order on ties.

    Accepts a score vector or a plain mapping read back from storage; missing
    entries count as 0.
    """
    if not isinstance(scores, PercentageScoreVector):
        scores = PercentageScoreVector.from_mapping(scores)
    return max(VARK_STYLES, key=lambda style: scores[style])


def dominant_styles(
    scores: PercentageScoreVector | Mapping[str, int],
    threshold: int = DOMINANT_THRESHOLD,
) -> List[str]:
    """List every tag at or above ``threshold``, highest first."""
    if not isinstance(scores, PercentageScoreVector):
        scores = PercentageScoreVector.from_mapping(scores)
    qualifying = [(style, pct) for style, pct in scores.items() if pct >= threshold]
    qualifying.sort(key=lambda pair: pair[1], reverse=True)
    return [style for style, _ in qualifying]
