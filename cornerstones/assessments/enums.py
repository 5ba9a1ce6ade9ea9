"""Enums for assessment and account categorical values."""

from __future__ import annotations

from enum import Enum, StrEnum

__all__ = [
    "VarkStyle",
    "UserRole",
    "CompletionStatus",
]


class VarkStyle(StrEnum):
    """VARK style tags; member order is the tie-break precedence."""

    VISUAL = "visual"
    AUDITORY = "auditory"
    READING_WRITING = "reading_writing"
    KINESTHETIC = "kinesthetic"


class UserRole(str, Enum):
    TEACHER = "teacher"
    STUDENT = "student"


class CompletionStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
