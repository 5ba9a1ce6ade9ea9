from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from cornerstones.assessments.constants import VARK_STYLES
from cornerstones.core.errors import ConflictError, MaterialNotFoundError, PermissionDeniedError, ValidationError
from cornerstones.core.logging import get_logger
from cornerstones.i18n.messages import AuthorizationMessages, MaterialMessages
from cornerstones.models.lms import ClassMaterial, Material
from cornerstones.services.classes import load_owned_class
from cornerstones.services.security import RequestContext

logger = get_logger("cornerstones.services.materials", component="service")


def _check_variants(variants: Iterable[Tuple[str, str]]) -> dict[str, str]:
    pairs = list(variants)
    unknown = sorted({style for style, _ in pairs if style not in VARK_STYLES})
    if unknown:
        raise ValidationError(
            "Variant styles must be VARK style tags",
            detail={"unknown_styles": unknown, "allowed": list(VARK_STYLES)},
        )
    styles = [style for style, _ in pairs]
    if len(styles) != len(set(styles)):
        raise ValidationError(MaterialMessages.DUPLICATE_VARIANT)
    return {style: content for style, content in pairs if content and content.strip()}


def load_owned_material(ctx: RequestContext, material_id: int) -> Material:
    teacher = ctx.require_teacher()
    material = ctx.repos.materials.get(material_id)
    if material is None:
        raise MaterialNotFoundError(MaterialMessages.NOT_FOUND)
    if material.teacher_id != teacher.id:
        raise PermissionDeniedError(AuthorizationMessages.NOT_MATERIAL_OWNER)
    return material


def create_material(
    ctx: RequestContext,
    *,
    title: str,
    original_content: str,
    subject: Optional[str] = None,
    content_type: str = "text",
    variants: Optional[Iterable[Tuple[str, str]]] = None,
) -> Material:
    """Store a material and any pre-generated per-style variants.

    Blank variants are dropped so a student with that style falls back to
    the original content.
    """
    teacher = ctx.require_teacher()
    cleaned = _check_variants(variants or ())
    try:
        material = ctx.repos.materials.create(
            teacher_id=teacher.id,
            title=title,
            subject=subject,
            content_type=content_type,
            original_content=original_content,
            variants=cleaned,
        )
        ctx.db.commit()
    except Exception:
        ctx.db.rollback()
        logger.exception(
            "material_create_failed",
            extra={"structured_data": {"teacher_id": teacher.id}},
        )
        raise
    ctx.db.refresh(material)
    logger.info(
        "material_created",
        extra={
            "structured_data": {
                "material_id": material.id,
                "teacher_id": teacher.id,
                "variants": sorted(cleaned),
            }
        },
    )
    return material


def list_materials(ctx: RequestContext) -> List[Material]:
    teacher = ctx.require_teacher()
    return ctx.repos.materials.list_for_teacher(teacher.id)


def assign_material(
    ctx: RequestContext,
    material_id: int,
    class_id: int,
    *,
    due_date: Optional[datetime] = None,
    is_visible: bool = True,
) -> ClassMaterial:
    material = load_owned_material(ctx, material_id)
    classroom = load_owned_class(ctx, class_id)
    repo = ctx.repos.class_materials
    if repo.find(classroom.id, material.id) is not None:
        raise ConflictError(MaterialMessages.ALREADY_ASSIGNED)
    try:
        assignment = repo.assign(
            class_id=classroom.id,
            material_id=material.id,
            due_date=due_date,
            is_visible=is_visible,
        )
        ctx.db.commit()
    except Exception:
        ctx.db.rollback()
        raise
    ctx.db.refresh(assignment)
    logger.info(
        "material_assigned",
        extra={"structured_data": {"material_id": material.id, "class_id": classroom.id}},
    )
    return assignment
