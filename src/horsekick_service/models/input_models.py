"""
Input data models for the prediction endpoint.

A request is a batch of rows, each row a mapping from column name to value.
Rows are deliberately untyped here: column checks, bounds and membership are
the sanitizer's job, so the request model only enforces the batch shape.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PredictRequest(BaseModel):
    """
    Batch of rows to score.

    Accepts either ``{"rows": [...]}`` or a bare JSON array of objects.
    """

    model_config = ConfigDict(extra="forbid")

    rows: list[dict[str, Any]] = Field(
        ...,
        description="Rows with at least year and corps; extra columns are ignored",
        examples=[[{"year": 1848, "corps": "I"}, {"year": 1871, "corps": "II"}]],
    )

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_array(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"rows": data}
        return data
