from fastapi import APIRouter

from cornerstones.assessments.constants import SIGNIFICANCE_THRESHOLD
from cornerstones.assessments.vark.interpretation import interpret
from cornerstones.assessments.vark.styles import STYLE_METADATA
from cornerstones.assessments.vark.types import Response
from cornerstones.core.config import settings
from cornerstones.schemas.assessment import (
    AssessmentResult,
    InterpretationOut,
    ScorePreviewRequest,
    ScoreVector,
)
from cornerstones.schemas.score import StyleCatalog, StyleOut
from cornerstones.services.assessment import preview_scores

router = APIRouter(tags=["score"])


@router.post("/score/preview", response_model=AssessmentResult)
def score_preview(payload: ScorePreviewRequest) -> AssessmentResult:
    result = preview_scores(
        Response(
            question_id=item.question_id,
            domain_id=item.domain_id,
            selected_style=item.selected_style,
            domain_weight=item.domain_weight,
        )
        for item in payload.responses
    )
    return AssessmentResult(
        scores=ScoreVector.from_vector(result.scores),
        interpretation=InterpretationOut.from_interpretation(result.interpretation),
    )


@router.post("/score/interpret", response_model=InterpretationOut)
def score_interpret(payload: ScoreVector) -> InterpretationOut:
    return InterpretationOut.from_interpretation(interpret(payload.to_vector()))


@router.get("/styles", response_model=StyleCatalog)
def list_styles() -> StyleCatalog:
    return StyleCatalog(
        significance_threshold=SIGNIFICANCE_THRESHOLD,
        dominant_threshold=settings.dominant_style_threshold,
        styles=[StyleOut.from_metadata(meta) for meta in STYLE_METADATA.values()],
    )
