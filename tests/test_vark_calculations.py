import pytest

from cornerstones.assessments.vark.calculations import (
    aggregate_style_weights,
    calculate_scores,
    dominant_style,
    dominant_styles,
)
from cornerstones.assessments.vark.types import PercentageScoreVector, Response


def _r(style, weight=None, qid="q"):
    return Response(question_id=qid, domain_id="d", selected_style=style, domain_weight=weight)


def test_empty_responses_fall_back_to_even_split():
    assert calculate_scores([]).as_dict() == {
        "visual": 25,
        "auditory": 25,
        "reading_writing": 25,
        "kinesthetic": 25,
    }


def test_single_visual_response_is_all_visual():
    assert calculate_scores([_r("visual")]).as_dict() == {
        "visual": 100,
        "auditory": 0,
        "reading_writing": 0,
        "kinesthetic": 0,
    }


def test_three_to_one_weighting():
    scores = calculate_scores([_r("visual", 3.0), _r("auditory", 1.0)])
    assert scores.visual == 75
    assert scores.auditory == 25
    assert scores.reading_writing == 0
    assert scores.kinesthetic == 0


def test_rounding_drift_goes_to_highest_style():
    # 33.33 each rounds to 33; the missing point lands on visual (first in precedence)
    scores = calculate_scores([_r("visual"), _r("auditory"), _r("reading_writing")])
    assert scores.total() == 100
    assert scores.as_dict() == {
        "visual": 34,
        "auditory": 33,
        "reading_writing": 33,
        "kinesthetic": 0,
    }


def test_over_rounding_is_taken_from_highest_style():
    # 1/6 and 5/6 of 3 styles: 16.67 -> 17, 16.67 -> 17, 66.67 -> 67 sums to 101
    scores = calculate_scores([_r("visual", 1), _r("auditory", 1), _r("kinesthetic", 4)])
    assert scores.total() == 100
    assert scores.kinesthetic == 66
    assert scores.visual == 17
    assert scores.auditory == 17


def test_half_values_round_up():
    # 1/8 = 12.5 -> 13 under half-up rounding
    scores = calculate_scores([_r("visual", 1), _r("auditory", 7)])
    assert scores.visual == 13
    assert scores.auditory == 87


@pytest.mark.parametrize(
    "responses",
    [
        [_r("visual", 1.5), _r("auditory", 1.25), _r("kinesthetic", 0.75)],
        [_r("reading_writing", 2), _r("reading_writing", 2), _r("visual", 1), _r("auditory", 1)],
        [_r(style, 1.0, qid=str(i)) for i, style in enumerate(["visual", "auditory"] * 7 + ["kinesthetic"])],
    ],
)
def test_percentages_always_sum_to_100(responses):
    scores = calculate_scores(responses)
    assert scores.total() == 100
    assert all(0 <= value <= 100 for _, value in scores.items())


def test_missing_weight_counts_as_one():
    assert calculate_scores([_r("visual"), _r("auditory", 1.0)]).as_dict()["visual"] == 50


def test_zero_weight_only_falls_back_to_even_split():
    assert calculate_scores([_r("visual", 0.0), _r("auditory", 0.0)]).visual == 25


def test_unknown_tags_are_ignored():
    scores = calculate_scores([_r("visual"), _r("olfactory"), _r(None)])
    assert scores.visual == 100
    raw = aggregate_style_weights([_r("olfactory", 5.0)])
    assert raw == {"visual": 0.0, "auditory": 0.0, "reading_writing": 0.0, "kinesthetic": 0.0}


def test_question_id_does_not_affect_scoring():
    a = calculate_scores([_r("visual", qid="x"), _r("auditory", qid="y")])
    b = calculate_scores([_r("visual", qid="1"), _r("auditory", qid="1")])
    assert a == b


def test_dominant_style_prefers_precedence_on_ties():
    assert dominant_style(PercentageScoreVector(25, 25, 25, 25)) == "visual"
    assert dominant_style({"auditory": 40, "kinesthetic": 40, "visual": 20}) == "auditory"
    assert dominant_style({"kinesthetic": 90}) == "kinesthetic"


def test_dominant_styles_threshold_and_order():
    scores = PercentageScoreVector(visual=30, auditory=10, reading_writing=20, kinesthetic=40)
    assert dominant_styles(scores) == ["kinesthetic", "visual"]
    assert dominant_styles(scores, threshold=20) == ["kinesthetic", "visual", "reading_writing"]
    assert dominant_styles(scores, threshold=50) == []


def test_overflowing_weights_keep_their_proportions():
    scores = calculate_scores([_r("auditory", 1e308, "a"), _r("kinesthetic", 1e308, "b")])
    assert scores.as_dict() == {"visual": 0, "auditory": 50, "reading_writing": 0, "kinesthetic": 50}

    stacked = calculate_scores([_r("reading_writing", 1e308, "a"), _r("reading_writing", 1e308, "b")])
    assert stacked.reading_writing == 100


def test_non_finite_weights_are_skipped():
    assert calculate_scores([_r("visual", float("inf")), _r("auditory", 1.0)]).auditory == 100
    assert calculate_scores([_r("kinesthetic", float("nan"))]).as_dict() == {
        "visual": 25,
        "auditory": 25,
        "reading_writing": 25,
        "kinesthetic": 25,
    }
    assert aggregate_style_weights([_r("visual", float("-inf"))])["visual"] == 0.0
