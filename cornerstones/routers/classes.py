from typing import List

from fastapi import APIRouter, Depends

from cornerstones.schemas.classroom import ClassCreate, ClassOut, JoinRequest, MembershipOut, StudentOut
from cornerstones.services import classes as class_service
from cornerstones.services.security import RequestContext, get_request_context

router = APIRouter(prefix="/classes", tags=["classes"])


@router.post("", response_model=ClassOut, status_code=201)
def create_class(payload: ClassCreate, ctx: RequestContext = Depends(get_request_context)):
    return class_service.create_class(ctx, payload.name, payload.description)


@router.get("", response_model=List[ClassOut])
def list_classes(ctx: RequestContext = Depends(get_request_context)):
    return class_service.list_classes(ctx)


@router.post("/join", response_model=MembershipOut, status_code=201)
def join_class(payload: JoinRequest, ctx: RequestContext = Depends(get_request_context)):
    return class_service.join_class(ctx, payload.join_code)


@router.get("/{class_id}/students", response_model=List[StudentOut])
def list_students(class_id: int, ctx: RequestContext = Depends(get_request_context)):
    return [
        StudentOut(
            id=row.profile.id,
            full_name=row.profile.full_name,
            email=row.profile.email,
            vark_visual=row.profile.vark_visual,
            vark_auditory=row.profile.vark_auditory,
            vark_reading_writing=row.profile.vark_reading_writing,
            vark_kinesthetic=row.profile.vark_kinesthetic,
            assessment_completed_at=row.profile.assessment_completed_at,
            dominant_style=row.dominant_style,
            dominant_styles=row.dominant_styles,
        )
        for row in class_service.list_students(ctx, class_id)
    ]
