"""
API-specific response models for FastAPI endpoints.

These models wrap the sanitizer's result and the model's predictions with
API metadata.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from horsekick_service.models.output_models import DroppedRow


class PredictResponse(BaseModel):
    """Response for the prediction endpoint."""

    model_config = ConfigDict(protected_namespaces=())

    predictions: list[float] = Field(
        description="Expected deaths, one per sanitized row, in row order"
    )
    rows: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Sanitized rows the predictions belong to",
    )
    dropped: list[DroppedRow] = Field(
        default_factory=list,
        description="Rows excluded during sanitization",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Human-readable descriptions of dropped rows",
    )
    model_version: str = Field(
        description="Version tag of the model artifact used for scoring"
    )


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    model_config = ConfigDict(protected_namespaces=())

    status: str = Field(
        description="Overall health status",
        examples=["healthy", "unhealthy"]
    )
    version: str = Field(
        description="Service version"
    )
    model_loaded: bool = Field(
        description="Whether the model handle is available"
    )
    model_version: Optional[str] = Field(
        default=None,
        description="Loaded model version, if any"
    )
    timestamp: datetime = Field(
        default_factory=datetime.utcnow,
        description="Health check timestamp (UTC)"
    )


class VersionResponse(BaseModel):
    """Response for version endpoint."""

    model_config = ConfigDict(protected_namespaces=())

    service_version: str
    model_version: Optional[str] = None
    sanitizer_config: dict[str, Any] = Field(
        default_factory=dict,
        description="Required columns, valid corps and year bounds in effect"
    )
