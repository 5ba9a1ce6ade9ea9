from typing import List

from fastapi import APIRouter, Depends

from cornerstones.schemas.material import (
    AssignedMaterialOut,
    AssignmentOut,
    AssignRequest,
    CompletionOut,
    CompletionWrite,
    MaterialCreate,
    MaterialOut,
)
from cornerstones.services import materials as material_service
from cornerstones.services import personalization
from cornerstones.services.security import RequestContext, get_request_context

router = APIRouter(prefix="/materials", tags=["materials"])


@router.post("", response_model=MaterialOut, status_code=201)
def create_material(payload: MaterialCreate, ctx: RequestContext = Depends(get_request_context)):
    return material_service.create_material(
        ctx,
        title=payload.title,
        subject=payload.subject,
        content_type=payload.content_type,
        original_content=payload.original_content,
        variants=[(v.learning_style, v.content) for v in payload.variants],
    )


@router.get("", response_model=List[MaterialOut])
def list_materials(ctx: RequestContext = Depends(get_request_context)):
    return material_service.list_materials(ctx)


@router.get("/assigned", response_model=List[AssignedMaterialOut])
def assigned_materials(ctx: RequestContext = Depends(get_request_context)):
    return [
        AssignedMaterialOut(
            class_material_id=item.assignment.id,
            class_id=item.assignment.class_id,
            class_name=item.assignment.classroom.name,
            material_id=item.material.id,
            title=item.material.title,
            subject=item.material.subject,
            content_type=item.material.content_type,
            due_date=item.assignment.due_date,
            preferred_style=item.preferred_style,
            variant_style=item.variant.style,
            is_original=item.variant.is_original,
            content=item.variant.content,
            completion=CompletionOut.model_validate(item.completion) if item.completion else None,
        )
        for item in personalization.list_assigned_materials(ctx)
    ]


@router.put("/assigned/{class_material_id}/completion", response_model=CompletionOut)
def update_completion(
    class_material_id: int,
    payload: CompletionWrite,
    ctx: RequestContext = Depends(get_request_context),
):
    return personalization.update_completion(
        ctx,
        class_material_id,
        status=payload.status,
        progress_percentage=payload.progress_percentage,
        time_spent_seconds=payload.time_spent_seconds,
    )


@router.post("/{material_id}/assign", response_model=AssignmentOut, status_code=201)
def assign_material(
    material_id: int,
    payload: AssignRequest,
    ctx: RequestContext = Depends(get_request_context),
):
    return material_service.assign_material(
        ctx,
        material_id,
        payload.class_id,
        due_date=payload.due_date,
        is_visible=payload.is_visible,
    )
