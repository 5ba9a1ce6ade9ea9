from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class StyleDistributionRow(BaseModel):
    style: str
    name: str
    count: int
    share: float
    mean: float


class ClassLearningStylesOut(BaseModel):
    class_id: int
    class_name: str
    total_students: int
    assessed_students: int
    assessment_rate: float
    multimodal_students: int
    dominant_counts: Dict[str, int]
    mean_scores: Dict[str, float]
    distribution: List[StyleDistributionRow]


class TransformRequest(BaseModel):
    text: str = Field(min_length=1, max_length=50_000)
    style: str = Field(min_length=1, max_length=20)
    subject: Optional[str] = Field(default=None, max_length=100)


class TransformOut(BaseModel):
    style: str
    content: str
