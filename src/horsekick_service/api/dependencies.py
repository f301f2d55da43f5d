"""
FastAPI dependency injection for the prediction service.

The model handle lives on ``app.state`` (acquired in the lifespan handler);
settings and the sanitization pipeline are process-wide singletons.
"""

from functools import lru_cache

from fastapi import HTTPException, Request, status

from horsekick_service.config import Settings, settings
from horsekick_service.sanitizer.pipeline import SanitizationPipeline
from horsekick_service.scoring.model import PoissonRateModel


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.

    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_sanitization_pipeline() -> SanitizationPipeline:
    """
    Get singleton sanitization pipeline.

    The pipeline holds only immutable configuration, so one instance serves
    every request. Python warnings are off here: dropped rows reach the client
    in the response and the operator through structlog.

    Returns:
        SanitizationPipeline instance
    """
    settings = get_settings()
    return SanitizationPipeline(
        required_columns=settings.REQUIRED_COLUMNS,
        valid_corps=settings.VALID_CORPS,
        year_bounds=settings.year_bounds,
        warn=False,
    )


def get_model(request: Request) -> PoissonRateModel:
    """
    Get the model handle loaded at startup.

    Raises:
        HTTPException: 503 if the handle has not been loaded
    """
    model = getattr(request.app.state, "model", None)
    if model is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Model not loaded",
        )
    return model
