from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from cornerstones.assessments.constants import MAX_DOMAIN_WEIGHT
from cornerstones.assessments.vark.types import Interpretation, PercentageScoreVector, Questionnaire

__all__ = [
    "OptionOut",
    "QuestionOut",
    "DomainOut",
    "QuestionnaireOut",
    "AnswerWrite",
    "SubmissionRequest",
    "ResponseWrite",
    "ScorePreviewRequest",
    "ScoreVector",
    "StyleScoreOut",
    "InterpretationOut",
    "AssessmentResult",
]


class OptionOut(BaseModel):
    style: str
    text: str


class QuestionOut(BaseModel):
    id: str
    text: str
    options: List[OptionOut]


class DomainOut(BaseModel):
    id: str
    name: str
    description: str
    weight: float
    questions: List[QuestionOut]


class QuestionnaireOut(BaseModel):
    instrument_id: str
    version: str
    total_questions: int
    domains: List[DomainOut]

    @classmethod
    def from_questionnaire(cls, questionnaire: Questionnaire) -> "QuestionnaireOut":
        return cls(
            instrument_id=questionnaire.instrument_id,
            version=questionnaire.version,
            total_questions=questionnaire.total_questions,
            domains=[
                DomainOut(
                    id=domain.id,
                    name=domain.name,
                    description=domain.description,
                    weight=domain.weight,
                    questions=[
                        QuestionOut(
                            id=question.id,
                            text=question.text,
                            options=[OptionOut(style=o.style, text=o.text) for o in question.options],
                        )
                        for question in domain.questions
                    ],
                )
                for domain in questionnaire.domains
            ],
        )


class AnswerWrite(BaseModel):
    question_id: str = Field(min_length=1, max_length=64)
    selected_style: str = Field(min_length=1, max_length=32)


class SubmissionRequest(BaseModel):
    answers: List[AnswerWrite] = Field(min_length=1)


class ResponseWrite(BaseModel):
    """Raw scorer input; tags are not validated so the scorer can drop them."""

    question_id: Optional[str] = None
    domain_id: Optional[str] = None
    selected_style: Optional[str] = None
    domain_weight: Optional[float] = Field(default=None, ge=0, le=MAX_DOMAIN_WEIGHT, allow_inf_nan=False)


class ScorePreviewRequest(BaseModel):
    responses: List[ResponseWrite] = Field(default_factory=list)


class ScoreVector(BaseModel):
    visual: int = Field(ge=0, le=100)
    auditory: int = Field(ge=0, le=100)
    reading_writing: int = Field(ge=0, le=100)
    kinesthetic: int = Field(ge=0, le=100)

    @classmethod
    def from_vector(cls, scores: PercentageScoreVector) -> "ScoreVector":
        return cls(**scores.as_dict())

    def to_vector(self) -> PercentageScoreVector:
        return PercentageScoreVector(**self.model_dump())


class StyleScoreOut(BaseModel):
    style: str
    name: str
    percentage: int
    description: str


class InterpretationOut(BaseModel):
    dominant: StyleScoreOut
    secondary: Optional[StyleScoreOut]
    is_multimodal: bool
    multimodal_styles: Optional[List[StyleScoreOut]]
    all_scores: List[StyleScoreOut]
    interpretation: str

    @classmethod
    def from_interpretation(cls, result: Interpretation) -> "InterpretationOut":
        return cls(
            dominant=StyleScoreOut(**result.dominant.as_dict()),
            secondary=StyleScoreOut(**result.secondary.as_dict()) if result.secondary else None,
            is_multimodal=result.is_multimodal,
            multimodal_styles=(
                [StyleScoreOut(**entry.as_dict()) for entry in result.multimodal_styles]
                if result.multimodal_styles is not None
                else None
            ),
            all_scores=[StyleScoreOut(**entry.as_dict()) for entry in result.all_scores],
            interpretation=result.interpretation,
        )


class AssessmentResult(BaseModel):
    scores: ScoreVector
    interpretation: InterpretationOut
    completed_at: Optional[datetime] = None
