from fastapi import APIRouter, Depends
from fastapi.responses import Response

from cornerstones.schemas.analytics import (
    ClassLearningStylesOut,
    StyleDistributionRow,
    TransformOut,
    TransformRequest,
)
from cornerstones.services import analytics
from cornerstones.services.security import RequestContext, get_request_context
from cornerstones.services.transform import ContentTransformClient, get_transform_client

router = APIRouter(tags=["analytics"])


@router.get("/analytics/classes/{class_id}/learning-styles", response_model=ClassLearningStylesOut)
def class_learning_styles(class_id: int, ctx: RequestContext = Depends(get_request_context)):
    summary = analytics.class_learning_styles(ctx, class_id)
    return ClassLearningStylesOut(
        class_id=summary.class_id,
        class_name=summary.class_name,
        total_students=summary.total_students,
        assessed_students=summary.assessed_students,
        assessment_rate=summary.assessment_rate,
        multimodal_students=summary.multimodal_students,
        dominant_counts=summary.dominant_counts,
        mean_scores=summary.mean_scores,
        distribution=[StyleDistributionRow(**row) for row in analytics.class_distribution_rows(summary)],
    )


@router.get("/analytics/classes/{class_id}/export")
def export_class(class_id: int, ctx: RequestContext = Depends(get_request_context)):
    body = analytics.export_class_csv(ctx, class_id)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="class_{class_id}_learning_styles.csv"'},
    )


@router.post("/transform", response_model=TransformOut, tags=["transform"])
def transform_content(
    payload: TransformRequest,
    ctx: RequestContext = Depends(get_request_context),
    client: ContentTransformClient = Depends(get_transform_client),
):
    content = client.transform(payload.text, payload.style, payload.subject)
    return TransformOut(style=payload.style, content=content)
