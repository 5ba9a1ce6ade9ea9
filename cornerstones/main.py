from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI, Request, Response
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cornerstones.assessments.vark import get_questionnaire
from cornerstones.core.config import settings
from cornerstones.core.logging import CORRELATION_HEADER, configure_logging, correlation_context, get_logger
from cornerstones.core.metrics import get_counters, get_metrics, inc_counter, set_instrumentation_enabled
from cornerstones.db.database import Base, engine, get_db
from cornerstones.routers.analytics import router as analytics_router
from cornerstones.routers.assessment import router as assessment_router
from cornerstones.routers.auth import router as auth_router
from cornerstones.routers.classes import router as classes_router
from cornerstones.routers.exceptions import register_exception_handlers
from cornerstones.routers.materials import router as materials_router
from cornerstones.routers.score import router as score_router

# Model modules must be imported before create_all
import cornerstones.models.lms  # noqa: F401


configure_logging(environment=settings.environment)
set_instrumentation_enabled(settings.debug_instrumentation_enabled)
logger = get_logger("cornerstones.app.main", component="app")

_app_start_time = datetime.now(timezone.utc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle.

    Development runs ``create_all()`` for convenience; production sets
    ``RUN_STARTUP_DDL=false`` and relies on ``alembic upgrade head``.
    """
    if settings.run_startup_ddl:
        logger.info("startup_execute_ddl", extra={"structured_data": {"run_startup_ddl": True}})
        Base.metadata.create_all(bind=engine)
    questionnaire = get_questionnaire()
    logger.info(
        "questionnaire_loaded",
        extra={
            "structured_data": {
                "version": questionnaire.version,
                "questions": questionnaire.total_questions,
            }
        },
    )
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
register_exception_handlers(app)


@app.middleware("http")
async def bind_correlation_id(request: Request, call_next):
    with correlation_context(request.headers.get(CORRELATION_HEADER)) as cid:
        inc_counter("http.requests")
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = cid
        return response


# Register routers at import time so tests see routes without requiring startup
app.include_router(auth_router)
app.include_router(assessment_router)
app.include_router(score_router)
app.include_router(classes_router)
app.include_router(materials_router)
app.include_router(analytics_router)


@app.get("/health")
def health(db: Session = Depends(get_db)):
    """Application status, database connectivity and a metrics summary.

    Suitable for load balancer health checks.
    """
    now = datetime.now(timezone.utc)
    counters = get_counters()
    metrics = get_metrics()

    try:
        db.execute(text("SELECT 1"))
        db_status = "connected"
        overall_status = "healthy"
    except SQLAlchemyError as exc:
        logger.error("health_check_db_failed", extra={"structured_data": {"error": str(exc)}})
        db_status = "disconnected"
        overall_status = "unhealthy"
    return {
        "status": overall_status,
        "started_at": _app_start_time.isoformat(),
        "uptime_seconds": round((now - _app_start_time).total_seconds(), 2),
        "environment": settings.environment,
        "total_requests": int(counters.get("http.requests", 0)),
        "database": {
            "status": db_status,
            "engine": "postgresql" if "postgresql" in str(settings.database_url) else "sqlite",
        },
        "metrics_summary": {
            "tracked_operations": len(metrics),
            "tracked_counters": len(counters),
        },
    }


@app.get("/", include_in_schema=False)
def root():
    """Lightweight index to avoid 404s and point to docs."""
    return {
        "name": settings.app_name,
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    return Response(status_code=204)
