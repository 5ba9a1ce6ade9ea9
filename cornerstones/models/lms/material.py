from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cornerstones.assessments.enums import CompletionStatus
from cornerstones.db.database import Base
from cornerstones.models.lms.classroom import Classroom

__all__ = ["Material", "MaterialTransformation", "ClassMaterial", "MaterialCompletion"]


class Material(Base):
    __tablename__ = "materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    teacher_id: Mapped[int] = mapped_column(ForeignKey("profiles.id"), index=True)
    title: Mapped[str] = mapped_column(String(255))
    subject: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    content_type: Mapped[str] = mapped_column(String(50), default="text")
    original_content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))

    transformations: Mapped[list["MaterialTransformation"]] = relationship(
        back_populates="material", cascade="all, delete-orphan"
    )


class MaterialTransformation(Base):
    """Pre-generated variant of a material for one learning style."""

    __tablename__ = "material_transformations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    material_id: Mapped[int] = mapped_column(ForeignKey("materials.id"), index=True)
    learning_style: Mapped[str] = mapped_column(String(20))
    content: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))

    material: Mapped[Material] = relationship(back_populates="transformations")

    __table_args__ = (
        UniqueConstraint("material_id", "learning_style", name="uq_material_style_unique"),
    )


class ClassMaterial(Base):
    __tablename__ = "class_materials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    class_id: Mapped[int] = mapped_column(ForeignKey("classes.id"), index=True)
    material_id: Mapped[int] = mapped_column(ForeignKey("materials.id"), index=True)
    assigned_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))
    due_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    is_visible: Mapped[bool] = mapped_column(Boolean, default=True)

    classroom: Mapped[Classroom] = relationship()
    material: Mapped[Material] = relationship()

    __table_args__ = (
        UniqueConstraint("class_id", "material_id", name="uq_class_material_unique"),
    )


class MaterialCompletion(Base):
    __tablename__ = "material_completions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    class_material_id: Mapped[int] = mapped_column(ForeignKey("class_materials.id"), index=True)
    student_id: Mapped[int] = mapped_column(ForeignKey("profiles.id"), index=True)
    status: Mapped[str] = mapped_column(String(20), default=CompletionStatus.NOT_STARTED.value)
    progress_percentage: Mapped[int] = mapped_column(Integer, default=0)
    preferred_style: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    time_spent_seconds: Mapped[int] = mapped_column(Integer, default=0)
    last_accessed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    __table_args__ = (
        UniqueConstraint("class_material_id", "student_id", name="uq_completion_student_unique"),
    )
