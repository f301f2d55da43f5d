"""
Prediction API routes.

POST /predict deserializes a batch of rows, sanitizes it, and scores the
surviving rows with the model handle loaded at startup.
"""

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from horsekick_service.api.dependencies import (
    get_model,
    get_sanitization_pipeline,
    get_settings,
)
from horsekick_service.api.models import (
    HealthResponse,
    PredictResponse,
    VersionResponse,
)
from horsekick_service.config import Settings
from horsekick_service.models.input_models import PredictRequest
from horsekick_service.monitoring.metrics import batch_size_rows, predictions_total
from horsekick_service.sanitizer.pipeline import SanitizationPipeline
from horsekick_service.scoring.model import PoissonRateModel

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.post(
    "/predict",
    response_model=PredictResponse,
    status_code=status.HTTP_200_OK,
    summary="Predict expected horse-kick deaths",
    description="""
    Score a batch of (year, corps) rows.

    Rows with a year outside the configured bounds or an unknown corps are
    dropped and reported in `dropped`; extra columns are ignored. A batch
    without a required column is rejected with 422.
    """,
    responses={
        200: {"description": "Batch scored (possibly with dropped rows)"},
        400: {"description": "Invalid request format"},
        422: {"description": "Required column missing from the batch"},
        503: {"description": "Model not loaded"},
    },
)
def predict(
    request: PredictRequest,
    pipeline: SanitizationPipeline = Depends(get_sanitization_pipeline),
    model: PoissonRateModel = Depends(get_model),
) -> PredictResponse:
    """
    Sanitize and score a batch of rows.

    Args:
        request: Batch of rows
        pipeline: Sanitization pipeline singleton (injected)
        model: Model handle from app state (injected)

    Returns:
        PredictResponse with predictions aligned to the sanitized rows
    """
    batch_size_rows.observe(len(request.rows))
    logger.info("Prediction request received", rows=len(request.rows))

    result = pipeline.run(request.rows)
    predictions = model.predict(result.rows)
    predictions_total.labels(model_version=model.version).inc(len(predictions))

    logger.info(
        "Prediction completed",
        scored=len(predictions),
        dropped=result.dropped_count,
        model_version=model.version,
    )

    return PredictResponse(
        predictions=predictions,
        rows=result.rows,
        dropped=result.dropped,
        warnings=[f"Dropped {record.describe()}" for record in result.dropped],
        model_version=model.version,
    )


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={
        200: {"description": "Model loaded, service ready"},
        503: {"description": "Model not loaded"},
    },
)
def health_check(request: Request, settings: Settings = Depends(get_settings)):
    """Report whether the model handle is available."""
    model = getattr(request.app.state, "model", None)
    response = HealthResponse(
        status="healthy" if model is not None else "unhealthy",
        version=settings.APP_VERSION,
        model_loaded=model is not None,
        model_version=model.version if model is not None else None,
    )

    return JSONResponse(
        status_code=status.HTTP_200_OK if model is not None else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )


@router.get(
    "/version",
    response_model=VersionResponse,
    summary="Get service and model version information",
)
def get_version(
    settings: Settings = Depends(get_settings),
    pipeline: SanitizationPipeline = Depends(get_sanitization_pipeline),
    model: PoissonRateModel = Depends(get_model),
) -> VersionResponse:
    """Return service version, model version and the sanitizer configuration."""
    return VersionResponse(
        service_version=settings.APP_VERSION,
        model_version=model.version,
        sanitizer_config={
            "required_columns": list(pipeline.required_columns),
            "valid_corps": sorted(pipeline.valid_corps),
            "year_bounds": list(pipeline.year_bounds),
            "warn_on_dropped_rows": pipeline.warn,
        },
    )
