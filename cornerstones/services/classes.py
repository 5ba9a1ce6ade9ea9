from __future__ import annotations

import secrets
import string
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import IntegrityError

from cornerstones.assessments.vark.calculations import dominant_style, dominant_styles
from cornerstones.core.config import settings
from cornerstones.core.errors import ClassNotFoundError, ConflictError, PermissionDeniedError
from cornerstones.core.logging import get_logger
from cornerstones.i18n.messages import AuthorizationMessages, ClassMessages
from cornerstones.models.lms import Classroom, ClassMembership, Profile
from cornerstones.services.security import RequestContext

logger = get_logger("cornerstones.services.classes", component="service")

JOIN_CODE_ALPHABET = string.ascii_uppercase + string.digits
JOIN_CODE_LENGTH = 6
_JOIN_CODE_ATTEMPTS = 10


def generate_join_code() -> str:
    return "".join(secrets.choice(JOIN_CODE_ALPHABET) for _ in range(JOIN_CODE_LENGTH))


@dataclass(frozen=True, slots=True)
class StudentRow:
    profile: Profile
    dominant_style: Optional[str]
    dominant_styles: List[str]


def load_owned_class(ctx: RequestContext, class_id: int) -> Classroom:
    """Return the class if the caller teaches it."""
    teacher = ctx.require_teacher()
    classroom = ctx.repos.classrooms.get(class_id)
    if classroom is None:
        raise ClassNotFoundError(ClassMessages.NOT_FOUND)
    if classroom.teacher_id != teacher.id:
        raise PermissionDeniedError(AuthorizationMessages.NOT_CLASS_OWNER)
    return classroom


def create_class(ctx: RequestContext, name: str, description: Optional[str]) -> Classroom:
    teacher = ctx.require_teacher()
    repo = ctx.repos.classrooms
    join_code = generate_join_code()
    for _ in range(_JOIN_CODE_ATTEMPTS):
        if not repo.join_code_exists(join_code):
            break
        join_code = generate_join_code()
    else:
        raise ConflictError("Could not allocate a unique join code")

    try:
        classroom = repo.create(
            teacher_id=teacher.id,
            name=name,
            description=description,
            join_code=join_code,
        )
        ctx.db.commit()
    except Exception:
        ctx.db.rollback()
        raise
    ctx.db.refresh(classroom)
    logger.info(
        "class_created",
        extra={"structured_data": {"class_id": classroom.id, "teacher_id": teacher.id}},
    )
    return classroom


def list_classes(ctx: RequestContext) -> List[Classroom]:
    if ctx.profile.is_teacher:
        return ctx.repos.classrooms.list_for_teacher(ctx.profile.id)
    return ctx.repos.classrooms.list_for_student(ctx.profile.id)


def join_class(ctx: RequestContext, join_code: str) -> ClassMembership:
    student = ctx.require_student()
    classroom = ctx.repos.classrooms.get_by_join_code(join_code)
    if classroom is None:
        raise ClassNotFoundError(ClassMessages.INVALID_JOIN_CODE)
    memberships = ctx.repos.memberships
    if memberships.get(classroom.id, student.id) is not None:
        raise ConflictError(ClassMessages.ALREADY_MEMBER)
    try:
        membership = memberships.add(classroom.id, student.id)
        ctx.db.commit()
    except IntegrityError as exc:
        ctx.db.rollback()
        raise ConflictError(ClassMessages.ALREADY_MEMBER) from exc
    ctx.db.refresh(membership)
    logger.info(
        "class_joined",
        extra={"structured_data": {"class_id": classroom.id, "student_id": student.id}},
    )
    return membership


def _student_row(student: Profile) -> StudentRow:
    if not student.has_vark_scores:
        return StudentRow(profile=student, dominant_style=None, dominant_styles=[])
    scores = student.vark_scores()
    return StudentRow(
        profile=student,
        dominant_style=dominant_style(scores),
        dominant_styles=dominant_styles(scores, threshold=settings.dominant_style_threshold),
    )


def list_students(ctx: RequestContext, class_id: int) -> List[StudentRow]:
    classroom = load_owned_class(ctx, class_id)
    return [_student_row(student) for student in ctx.repos.profiles.list_class_students(classroom.id)]
