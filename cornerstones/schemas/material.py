from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from cornerstones.assessments.enums import CompletionStatus


class VariantWrite(BaseModel):
    learning_style: str = Field(min_length=1, max_length=20)
    content: str


class MaterialCreate(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    subject: Optional[str] = Field(default=None, max_length=100)
    content_type: str = Field(default="text", max_length=50)
    original_content: str = Field(min_length=1)
    variants: List[VariantWrite] = Field(default_factory=list)


class VariantOut(BaseModel):
    learning_style: str
    content: str
    model_config = {"from_attributes": True}


class MaterialOut(BaseModel):
    id: int
    teacher_id: int
    title: str
    subject: Optional[str] = None
    content_type: str
    original_content: str
    created_at: datetime
    transformations: List[VariantOut] = Field(default_factory=list)
    model_config = {"from_attributes": True}


class AssignRequest(BaseModel):
    class_id: int
    due_date: Optional[datetime] = None
    is_visible: bool = True


class AssignmentOut(BaseModel):
    id: int
    class_id: int
    material_id: int
    assigned_at: datetime
    due_date: Optional[datetime] = None
    is_visible: bool
    model_config = {"from_attributes": True}


class CompletionWrite(BaseModel):
    status: CompletionStatus
    progress_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    time_spent_seconds: int = Field(default=0, ge=0)


class CompletionOut(BaseModel):
    class_material_id: int
    student_id: int
    status: CompletionStatus
    progress_percentage: int
    preferred_style: Optional[str] = None
    time_spent_seconds: int
    last_accessed_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    model_config = {"from_attributes": True}


class AssignedMaterialOut(BaseModel):
    class_material_id: int
    class_id: int
    class_name: str
    material_id: int
    title: str
    subject: Optional[str] = None
    content_type: str
    due_date: Optional[datetime] = None
    preferred_style: Optional[str] = None
    variant_style: Optional[str] = None
    is_original: bool
    content: str
    completion: Optional[CompletionOut] = None
