"""
Pydantic data models.

- enums.py: DropReason
- input_models.py: PredictRequest (API body)
- output_models.py: DroppedRow, SanitizationResult
"""

from .enums import DropReason
from .input_models import PredictRequest
from .output_models import DroppedRow, SanitizationResult

__all__ = [
    "DropReason",
    "PredictRequest",
    "DroppedRow",
    "SanitizationResult",
]
