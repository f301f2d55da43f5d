"""
Poisson-rate model handle.

The model is a fitted log-linear Poisson regression of deaths on year and
corps. Scoring a row returns the expected number of deaths:

    rate = exp(intercept + year_coefficient * year + corps_effects[corps])

The handle is immutable. It is loaded once at process startup and passed
explicitly to whatever needs to score rows.
"""

import json
import math
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ModelLoadError

logger = structlog.get_logger(__name__)

DEFAULT_MODEL_PATH = Path(__file__).resolve().parent.parent / "resources" / "poisson_v1.json"


class PoissonRateModel(BaseModel):
    """Fitted Poisson regression coefficients (frozen)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    version: str = Field(..., min_length=1, description="Artifact version tag")
    intercept: float
    year_coefficient: float
    corps_effects: dict[str, float] = Field(
        default_factory=dict,
        description="Additive log-rate effect per corps; missing corps score with 0",
    )
    baseline_corps: str | None = None

    def linear_predictor(self, year: int, corps: str) -> float:
        return self.intercept + self.year_coefficient * year + self.corps_effects.get(corps, 0.0)

    def predict(self, rows: Sequence[Mapping[str, Any]]) -> list[float]:
        """
        Expected deaths for each row.

        Args:
            rows: Sanitized rows with integer ``year`` and string ``corps``

        Returns:
            One non-negative float per row, in input order
        """
        return [math.exp(self.linear_predictor(row["year"], row["corps"])) for row in rows]


def load_model(path: str | Path | None = None) -> PoissonRateModel:
    """
    Load a model artifact from a JSON file.

    Args:
        path: Artifact path; None or "" loads the bundled default artifact

    Raises:
        ModelLoadError: If the file is missing, not JSON, or fails validation
    """
    model_path = Path(path) if path else DEFAULT_MODEL_PATH

    try:
        with open(model_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise ModelLoadError(f"Model artifact not found: {model_path}", path=str(model_path)) from e
    except json.JSONDecodeError as e:
        raise ModelLoadError(
            f"Model artifact is not valid JSON: {e.msg} (line {e.lineno})",
            path=str(model_path),
        ) from e

    try:
        model = PoissonRateModel.model_validate(payload)
    except PydanticValidationError as e:
        error_messages = [
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise ModelLoadError(
            f"Model artifact failed validation: {'; '.join(error_messages)}",
            path=str(model_path),
        ) from e

    logger.info(
        "Model loaded",
        path=str(model_path),
        version=model.version,
        corps=sorted(model.corps_effects),
    )
    return model
