"""Validation of questionnaire submissions before they reach the scorer.

The scorer tolerates malformed responses by dropping them. Submissions that
come in over the API are held to the questionnaire instead, so a typo'd
style or a stale question id is reported rather than silently ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from cornerstones.assessments.constants import VARK_STYLES
from cornerstones.assessments.vark.types import Questionnaire, Response
from cornerstones.core.errors import InvalidAssessmentData
from cornerstones.i18n.messages import AssessmentMessages

__all__ = ["SubmittedAnswer", "validate_submission", "build_responses"]


@dataclass(frozen=True, slots=True)
class SubmittedAnswer:
    question_id: str
    selected_style: str


def validate_submission(questionnaire: Questionnaire, answers: Sequence[SubmittedAnswer]) -> None:
    """Raise ``InvalidAssessmentData`` describing every problem found.

    Checks, in order of reporting: unknown question ids, duplicate answers,
    styles that are not VARK tags or not offered by the question, and
    unanswered questions.
    """
    index = questionnaire.question_index()
    issues: List[dict[str, str]] = []
    seen: set[str] = set()
    for answer in answers:
        entry = index.get(answer.question_id)
        if entry is None:
            issues.append({"question_id": answer.question_id, "code": "unknown_question"})
            continue
        if answer.question_id in seen:
            issues.append({"question_id": answer.question_id, "code": "duplicate_answer"})
            continue
        seen.add(answer.question_id)
        _, question = entry
        if answer.selected_style not in VARK_STYLES:
            issues.append({"question_id": answer.question_id, "code": "unknown_style"})
        elif not question.offers(answer.selected_style):
            issues.append({"question_id": answer.question_id, "code": "style_not_offered"})
    for question_id in index:
        if question_id not in seen:
            issues.append({"question_id": question_id, "code": "unanswered"})
    if issues:
        raise InvalidAssessmentData(
            AssessmentMessages.INVALID_SUBMISSION,
            detail={"issues": issues},
        )


def build_responses(questionnaire: Questionnaire, answers: Iterable[SubmittedAnswer]) -> List[Response]:
    """Attach domain id and weight to each answer, in questionnaire order.

    Answers for unknown questions are skipped; call ``validate_submission``
    first when strictness is required.
    """
    by_question = {answer.question_id: answer for answer in answers}
    responses: List[Response] = []
    for domain in questionnaire.domains:
        for question in domain.questions:
            answer = by_question.get(question.id)
            if answer is None:
                continue
            responses.append(
                Response(
                    question_id=question.id,
                    domain_id=domain.id,
                    selected_style=answer.selected_style,
                    domain_weight=domain.weight,
                )
            )
    return responses
