from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ClassCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, max_length=500)


class ClassOut(BaseModel):
    id: int
    teacher_id: int
    name: str
    description: Optional[str] = None
    join_code: str
    created_at: datetime
    model_config = {"from_attributes": True}


class JoinRequest(BaseModel):
    join_code: str = Field(min_length=6, max_length=6, pattern=r"^[A-Za-z0-9]{6}$")


class MembershipOut(BaseModel):
    id: int
    class_id: int
    student_id: int
    joined_at: datetime
    model_config = {"from_attributes": True}


class StudentOut(BaseModel):
    id: int
    full_name: str
    email: str
    vark_visual: int
    vark_auditory: int
    vark_reading_writing: int
    vark_kinesthetic: int
    assessment_completed_at: Optional[datetime] = None
    dominant_style: Optional[str] = None
    dominant_styles: List[str] = Field(default_factory=list)
