from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cornerstones.assessments.enums import UserRole
from cornerstones.assessments.vark.types import PercentageScoreVector
from cornerstones.db.database import Base

__all__ = ["Profile"]


class Profile(Base):
    """Account plus the persisted VARK percentage vector."""

    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    full_name: Mapped[str] = mapped_column(String(255))
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(20), default=UserRole.STUDENT.value)

    vark_visual: Mapped[int] = mapped_column(Integer, default=0)
    vark_auditory: Mapped[int] = mapped_column(Integer, default=0)
    vark_reading_writing: Mapped[int] = mapped_column(Integer, default=0)
    vark_kinesthetic: Mapped[int] = mapped_column(Integer, default=0)
    assessment_completed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    @property
    def is_teacher(self) -> bool:
        return self.role == UserRole.TEACHER.value

    @property
    def has_vark_scores(self) -> bool:
        # A zeroed vector means the assessment was never submitted.
        return any(value > 0 for value in self.vark_scores().as_dict().values())

    def vark_scores(self) -> PercentageScoreVector:
        return PercentageScoreVector(
            visual=self.vark_visual or 0,
            auditory=self.vark_auditory or 0,
            reading_writing=self.vark_reading_writing or 0,
            kinesthetic=self.vark_kinesthetic or 0,
        )

    def apply_vark_scores(self, scores: PercentageScoreVector, completed_at: datetime) -> None:
        self.vark_visual = scores.visual
        self.vark_auditory = scores.auditory
        self.vark_reading_writing = scores.reading_writing
        self.vark_kinesthetic = scores.kinesthetic
        self.assessment_completed_at = completed_at
