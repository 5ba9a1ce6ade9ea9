import pytest
import yaml

from cornerstones.assessments.validators import SubmittedAnswer, build_responses, validate_submission
from cornerstones.assessments.vark import QUESTIONNAIRE_PATH, load_questionnaire
from cornerstones.assessments.vark.types import Questionnaire
from cornerstones.core.errors import InvalidAssessmentData


@pytest.fixture(scope="module")
def questionnaire():
    return load_questionnaire()


def _all(questionnaire, style="visual"):
    return [SubmittedAnswer(qid, style) for qid in questionnaire.question_index()]


def test_bundled_questionnaire_shape(questionnaire):
    assert questionnaire.instrument_id == "VARK"
    assert questionnaire.total_questions == 15
    assert [d.id for d in questionnaire.domains] == [
        "information_processing",
        "problem_solving",
        "collaboration_communication",
        "study_review",
        "application_practice",
    ]
    assert [d.weight for d in questionnaire.domains] == [1.5, 1.25, 1.0, 1.0, 0.75]
    for domain in questionnaire.domains:
        for question in domain.questions:
            assert {o.style for o in question.options} == {
                "visual",
                "auditory",
                "reading_writing",
                "kinesthetic",
            }


def test_from_raw_rejects_bad_configuration():
    with QUESTIONNAIRE_PATH.open(encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)

    raw["domains"][0]["weight"] = 0
    with pytest.raises(ValueError, match="positive weight"):
        Questionnaire.from_raw(raw)

    raw["domains"][0]["weight"] = 1.0
    raw["domains"][1]["questions"][0]["id"] = raw["domains"][0]["questions"][0]["id"]
    with pytest.raises(ValueError, match="Duplicate question id"):
        Questionnaire.from_raw(raw)


def test_from_raw_rejects_unknown_option_style():
    raw = {
        "id": "VARK",
        "version": "x",
        "domains": [
            {
                "id": "d",
                "name": "D",
                "weight": 1,
                "questions": [
                    {
                        "id": "q",
                        "text": "?",
                        "options": [
                            {"style": "visual", "text": "a"},
                            {"style": "auditory", "text": "b"},
                            {"style": "reading_writing", "text": "c"},
                            {"style": "smell", "text": "d"},
                        ],
                    }
                ],
            }
        ],
    }
    with pytest.raises(ValueError, match="unknown styles"):
        Questionnaire.from_raw(raw)


def test_complete_submission_passes(questionnaire):
    validate_submission(questionnaire, _all(questionnaire))


def test_submission_issues_are_collected(questionnaire):
    answers = _all(questionnaire)[1:]  # drop the first question
    answers.append(SubmittedAnswer("nope", "visual"))
    answers.append(SubmittedAnswer(answers[0].question_id, "auditory"))
    answers[1] = SubmittedAnswer(answers[1].question_id, "olfactory")
    with pytest.raises(InvalidAssessmentData) as excinfo:
        validate_submission(questionnaire, answers)
    codes = {issue["code"] for issue in excinfo.value.detail["issues"]}
    assert codes == {"unanswered", "unknown_question", "duplicate_answer", "unknown_style"}
    assert excinfo.value.status_code == 400


def test_build_responses_carries_domain_weight(questionnaire):
    responses = build_responses(questionnaire, list(reversed(_all(questionnaire, "auditory"))))
    assert [r.question_id for r in responses][:3] == ["ip_1", "ip_2", "ip_3"]
    assert responses[0].domain_id == "information_processing"
    assert responses[0].domain_weight == 1.5
    assert responses[-1].domain_weight == 0.75
    assert all(r.selected_style == "auditory" for r in responses)
