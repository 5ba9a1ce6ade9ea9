from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from cornerstones.assessments.enums import CompletionStatus
from cornerstones.assessments.vark.calculations import dominant_style
from cornerstones.core.errors import MaterialNotFoundError, PermissionDeniedError
from cornerstones.core.logging import get_logger
from cornerstones.core.numeric import clamp
from cornerstones.i18n.messages import AuthorizationMessages, MaterialMessages
from cornerstones.models.lms import ClassMaterial, Material, MaterialCompletion, Profile
from cornerstones.services.security import RequestContext

logger = get_logger("cornerstones.services.personalization", component="service")


@dataclass(frozen=True, slots=True)
class ContentVariant:
    style: Optional[str]
    content: str
    is_original: bool


@dataclass(frozen=True, slots=True)
class AssignedMaterial:
    assignment: ClassMaterial
    material: Material
    preferred_style: Optional[str]
    variant: ContentVariant
    completion: Optional[MaterialCompletion]


def preferred_style_for(profile: Profile) -> Optional[str]:
    """Dominant style of the persisted vector, or None before the assessment."""
    if not profile.has_vark_scores:
        return None
    return dominant_style(profile.vark_scores())


def select_variant(material: Material, style: Optional[str]) -> ContentVariant:
    """Pick the material's variant for ``style``; fall back to the original."""
    if style is not None:
        for transformation in material.transformations:
            if transformation.learning_style == style:
                return ContentVariant(style=style, content=transformation.content, is_original=False)
    return ContentVariant(style=None, content=material.original_content, is_original=True)


def list_assigned_materials(ctx: RequestContext) -> List[AssignedMaterial]:
    student = ctx.require_student()
    class_ids = ctx.repos.memberships.class_ids_for_student(student.id)
    assignments = ctx.repos.class_materials.list_visible_for_classes(class_ids)
    completions = ctx.repos.completions.for_student(student.id, [a.id for a in assignments])
    style = preferred_style_for(student)
    return [
        AssignedMaterial(
            assignment=assignment,
            material=assignment.material,
            preferred_style=style,
            variant=select_variant(assignment.material, style),
            completion=completions.get(assignment.id),
        )
        for assignment in assignments
    ]


def _load_visible_assignment(ctx: RequestContext, class_material_id: int) -> ClassMaterial:
    student = ctx.profile
    assignment = ctx.repos.class_materials.get(class_material_id)
    if assignment is None or not assignment.is_visible:
        raise MaterialNotFoundError(MaterialMessages.ASSIGNMENT_NOT_FOUND)
    if ctx.repos.memberships.get(assignment.class_id, student.id) is None:
        raise PermissionDeniedError(AuthorizationMessages.NOT_CLASS_MEMBER)
    return assignment


def update_completion(
    ctx: RequestContext,
    class_material_id: int,
    *,
    status: CompletionStatus,
    progress_percentage: Optional[int] = None,
    time_spent_seconds: int = 0,
) -> MaterialCompletion:
    """Upsert the caller's completion record for an assigned material.

    ``time_spent_seconds`` is added to the stored total. Completing a
    material pins progress at 100 and stamps ``completed_at`` once.
    """
    student = ctx.require_student()
    assignment = _load_visible_assignment(ctx, class_material_id)
    repo = ctx.repos.completions
    completion = repo.get(assignment.id, student.id)
    if completion is None:
        completion = repo.create(assignment.id, student.id)

    now = datetime.now(timezone.utc)
    completion.status = status.value
    if progress_percentage is not None:
        completion.progress_percentage = int(clamp(progress_percentage, 0, 100))
    completion.time_spent_seconds = (completion.time_spent_seconds or 0) + max(time_spent_seconds, 0)
    completion.preferred_style = preferred_style_for(student)
    completion.last_accessed_at = now
    if status is CompletionStatus.COMPLETED:
        completion.progress_percentage = 100
        if completion.completed_at is None:
            completion.completed_at = now

    try:
        ctx.db.commit()
    except Exception:
        ctx.db.rollback()
        logger.exception(
            "completion_persist_failed",
            extra={"structured_data": {"class_material_id": assignment.id, "student_id": student.id}},
        )
        raise
    ctx.db.refresh(completion)
    logger.info(
        "completion_updated",
        extra={
            "structured_data": {
                "class_material_id": assignment.id,
                "student_id": student.id,
                "status": completion.status,
                "progress": completion.progress_percentage,
            }
        },
    )
    return completion
