from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from cornerstones.assessments.enums import UserRole


class ProfileCreate(BaseModel):
    full_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=8, max_length=72)
    role: UserRole = UserRole.STUDENT


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class ProfileOut(BaseModel):
    id: int
    full_name: str
    email: EmailStr
    role: UserRole
    vark_visual: int
    vark_auditory: int
    vark_reading_writing: int
    vark_kinesthetic: int
    assessment_completed_at: Optional[datetime] = None
    has_vark_scores: bool
    model_config = {"from_attributes": True}
