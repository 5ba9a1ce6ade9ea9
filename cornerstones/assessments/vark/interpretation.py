from __future__ import annotations

from typing import Mapping, Sequence

from cornerstones.assessments.constants import SIGNIFICANCE_THRESHOLD
from .styles import STYLE_METADATA
from .types import Interpretation, PercentageScoreVector, StyleScore

__all__ = ["rank_styles", "interpret", "build_summary"]


def rank_styles(scores: PercentageScoreVector) -> tuple[StyleScore, ...]:
    """Sort the four styles by percentage, highest first.

    The sort is stable over precedence order, so equal percentages keep
    visual, auditory, reading_writing, kinesthetic ordering.
    """
    ranked = sorted(scores.items(), key=lambda pair: pair[1], reverse=True)
    return tuple(
        StyleScore(
            style=style,
            name=STYLE_METADATA[style].name,
            percentage=percentage,
            description=STYLE_METADATA[style].description,
        )
        for style, percentage in ranked
    )


def build_summary(dominant: StyleScore, multimodal_styles: Sequence[StyleScore]) -> str:
    if len(multimodal_styles) > 1:
        names = " and ".join(entry.name for entry in multimodal_styles)
        return (
            f"You're a multimodal learner with strengths in {names}. "
            "This means you can adapt your learning approach based on the material and situation."
        )
    return f"You're primarily a {dominant.name} learner. {dominant.description}"


def interpret(scores: PercentageScoreVector | Mapping[str, int]) -> Interpretation:
    """Classify a score vector into dominant/secondary styles and modality.

    A style counts as significant at 25% or more. The secondary style is
    reported only when significant; the respondent is multimodal when two or
    more styles are significant.
    """
    if not isinstance(scores, PercentageScoreVector):
        scores = PercentageScoreVector.from_mapping(scores)
    ranked = rank_styles(scores)
    dominant = ranked[0]
    runner_up = ranked[1]
    secondary = runner_up if runner_up.percentage >= SIGNIFICANCE_THRESHOLD else None
    significant = tuple(entry for entry in ranked if entry.percentage >= SIGNIFICANCE_THRESHOLD)
    is_multimodal = len(significant) > 1
    return Interpretation(
        dominant=dominant,
        secondary=secondary,
        is_multimodal=is_multimodal,
        multimodal_styles=significant if is_multimodal else None,
        all_scores=ranked,
        interpretation=build_summary(dominant, significant),
    )
