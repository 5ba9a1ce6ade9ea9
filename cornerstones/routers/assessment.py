from fastapi import APIRouter, Depends

from cornerstones.assessments.validators import SubmittedAnswer
from cornerstones.assessments.vark import get_questionnaire
from cornerstones.schemas.assessment import (
    AssessmentResult,
    InterpretationOut,
    QuestionnaireOut,
    ScoreVector,
    SubmissionRequest,
)
from cornerstones.services.assessment import AssessmentService, ScoredAssessment
from cornerstones.services.security import RequestContext, get_request_context

router = APIRouter(prefix="/assessment", tags=["assessment"])


def _result(scored: ScoredAssessment) -> AssessmentResult:
    return AssessmentResult(
        scores=ScoreVector.from_vector(scored.scores),
        interpretation=InterpretationOut.from_interpretation(scored.interpretation),
        completed_at=scored.completed_at,
    )


@router.get("/questionnaire", response_model=QuestionnaireOut)
def questionnaire():
    return QuestionnaireOut.from_questionnaire(get_questionnaire())


@router.post("/submit", response_model=AssessmentResult)
def submit(payload: SubmissionRequest, ctx: RequestContext = Depends(get_request_context)):
    answers = [SubmittedAnswer(a.question_id, a.selected_style) for a in payload.answers]
    return _result(AssessmentService(ctx).submit(answers))


@router.get("/me", response_model=AssessmentResult)
def my_assessment(ctx: RequestContext = Depends(get_request_context)):
    return _result(AssessmentService(ctx).current())
