from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Sequence

from cornerstones.assessments.validators import SubmittedAnswer, build_responses, validate_submission
from cornerstones.assessments.vark import get_questionnaire
from cornerstones.assessments.vark.calculations import calculate_scores
from cornerstones.assessments.vark.interpretation import interpret
from cornerstones.assessments.vark.types import Interpretation, PercentageScoreVector, Questionnaire, Response
from cornerstones.core.errors import AssessmentNotTakenError
from cornerstones.core.logging import get_logger
from cornerstones.core.metrics import count_calls, inc_counter, measure_time
from cornerstones.i18n.messages import AssessmentMessages
from cornerstones.services.security import RequestContext

logger = get_logger("cornerstones.services.assessment", component="service")


@dataclass(frozen=True, slots=True)
class ScoredAssessment:
    scores: PercentageScoreVector
    interpretation: Interpretation
    completed_at: datetime | None = None


@count_calls("assessment.preview.calls")
def preview_scores(responses: Iterable[Response]) -> ScoredAssessment:
    """Score and interpret raw responses without touching any profile."""
    scores = calculate_scores(responses)
    return ScoredAssessment(scores=scores, interpretation=interpret(scores))


class AssessmentService:
    """Runs the questionnaire flow for the authenticated caller."""

    def __init__(self, ctx: RequestContext, questionnaire: Questionnaire | None = None) -> None:
        self.ctx = ctx
        self.questionnaire = questionnaire or get_questionnaire()

    @measure_time("assessment.submit")
    def submit(self, answers: Sequence[SubmittedAnswer]) -> ScoredAssessment:
        """Validate answers, score them and persist the vector on the profile.

        Retaking the assessment overwrites the previous vector and timestamp.
        """
        profile = self.ctx.require_student()
        validate_submission(self.questionnaire, answers)
        responses = build_responses(self.questionnaire, answers)
        scores = calculate_scores(responses)
        completed_at = datetime.now(timezone.utc)
        retake = profile.has_vark_scores

        profile.apply_vark_scores(scores, completed_at)
        db = self.ctx.db
        try:
            db.commit()
        except Exception:
            db.rollback()
            logger.exception(
                "assessment_persist_failed",
                extra={"structured_data": {"profile_id": profile.id}},
            )
            raise
        db.refresh(profile)

        inc_counter("assessment.submit.completed")
        interpretation = interpret(scores)
        logger.info(
            "assessment_scored",
            extra={
                "structured_data": {
                    "profile_id": profile.id,
                    "responses": len(responses),
                    "dominant": interpretation.dominant.style,
                    "multimodal": interpretation.is_multimodal,
                    "retake": retake,
                }
            },
        )
        return ScoredAssessment(scores=scores, interpretation=interpretation, completed_at=completed_at)

    def current(self) -> ScoredAssessment:
        """Interpretation of the persisted vector; raises when never taken."""
        profile = self.ctx.profile
        if not profile.has_vark_scores:
            raise AssessmentNotTakenError(AssessmentMessages.NOT_TAKEN)
        scores = profile.vark_scores()
        return ScoredAssessment(
            scores=scores,
            interpretation=interpret(scores),
            completed_at=profile.assessment_completed_at,
        )
