from cornerstones.assessments.vark.calculations import calculate_scores
from cornerstones.assessments.vark.interpretation import build_summary, interpret, rank_styles
from cornerstones.assessments.vark.styles import STYLE_METADATA
from cornerstones.assessments.vark.types import PercentageScoreVector, Response


def test_multimodal_profile():
    result = interpret(PercentageScoreVector(visual=40, auditory=35, reading_writing=15, kinesthetic=10))
    assert result.dominant.style == "visual"
    assert result.dominant.percentage == 40
    assert result.secondary is not None and result.secondary.style == "auditory"
    assert result.is_multimodal is True
    assert [s.style for s in result.multimodal_styles] == ["visual", "auditory"]
    assert result.interpretation == (
        "You're a multimodal learner with strengths in Visual and Auditory. "
        "This means you can adapt your learning approach based on the material and situation."
    )


def test_unimodal_profile():
    result = interpret(PercentageScoreVector(visual=10, auditory=10, reading_writing=10, kinesthetic=70))
    assert result.dominant.style == "kinesthetic"
    assert result.secondary is None
    assert result.is_multimodal is False
    assert result.multimodal_styles is None
    assert result.interpretation == (
        "You're primarily a Kinesthetic learner. " + STYLE_METADATA["kinesthetic"].description
    )


def test_even_split_is_multimodal_with_visual_first():
    result = interpret(PercentageScoreVector(25, 25, 25, 25))
    assert result.dominant.style == "visual"
    assert result.secondary.style == "auditory"
    assert result.is_multimodal is True
    assert [s.style for s in result.all_scores] == ["visual", "auditory", "reading_writing", "kinesthetic"]
    assert "Visual and Auditory and Reading/Writing and Kinesthetic" in result.interpretation


def test_secondary_requires_significance():
    result = interpret(PercentageScoreVector(visual=76, auditory=24, reading_writing=0, kinesthetic=0))
    assert result.secondary is None
    assert result.is_multimodal is False


def test_all_scores_sorted_descending():
    ranked = rank_styles(PercentageScoreVector(visual=5, auditory=50, reading_writing=30, kinesthetic=15))
    assert [s.percentage for s in ranked] == [50, 30, 15, 5]
    assert ranked[0].name == "Auditory"
    assert ranked[1].name == "Reading/Writing"


def test_interpretation_is_idempotent():
    scores = calculate_scores(
        [
            Response("q1", "d1", "reading_writing", 1.5),
            Response("q2", "d1", "auditory", 1.25),
            Response("q3", "d2", "reading_writing", 1.0),
        ]
    )
    assert interpret(scores) == interpret(scores)


def test_interpret_accepts_stored_mapping():
    result = interpret({"visual": 20, "auditory": 20, "reading_writing": 50, "kinesthetic": 10})
    assert result.dominant.style == "reading_writing"
    assert result.dominant.description == STYLE_METADATA["reading_writing"].description


def test_build_summary_single_significant_style_is_unimodal_text():
    dominant = rank_styles(PercentageScoreVector(100, 0, 0, 0))[0]
    assert build_summary(dominant, [dominant]).startswith("You're primarily a Visual learner.")
